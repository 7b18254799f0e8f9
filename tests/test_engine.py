# =============================================================================
# Rendering Engine Tests
# =============================================================================

from kata_tui.config import RenderingConfig
from kata_tui.core import Problem
from kata_tui.rendering import RenderEngine
from kata_tui.rendering.engine import CACHE_SIZE, EMPTY_PLACEHOLDER, PREMIUM_PLACEHOLDER


def test_renders_description(sample_problem):
    result = RenderEngine().render(sample_problem)

    assert not result.placeholder
    assert not result.cached
    assert result.lines[0].text.startswith("Given an array of integers")


def test_premium_placeholder(premium_problem):
    result = RenderEngine().render(premium_problem)

    assert result.placeholder
    assert [line.text for line in result.lines] == [PREMIUM_PLACEHOLDER]


def test_missing_content_placeholder():
    for content in (None, "", "   \n"):
        result = RenderEngine().render(Problem(title="Empty", content=content))
        assert result.placeholder
        assert [line.text for line in result.lines] == [EMPTY_PLACEHOLDER]


def test_premium_with_content_renders_normally():
    problem = Problem(title="Paid", content="<p>visible</p>", is_paid_only=True)
    result = RenderEngine().render(problem)

    assert not result.placeholder
    assert [line.text for line in result.lines] == ["visible"]


def test_results_are_cached(sample_problem):
    engine = RenderEngine()
    first = engine.render(sample_problem)
    second = engine.render(sample_problem)

    assert second.cached
    assert second.lines == first.lines


def test_cache_survives_caller_mutation(sample_problem):
    engine = RenderEngine()
    engine.render(sample_problem).lines.clear()

    assert engine.render(sample_problem).lines


def test_changed_content_is_rerendered():
    engine = RenderEngine()
    engine.render(Problem(title="A", title_slug="a", content="old"))
    result = engine.render(Problem(title="A", title_slug="a", content="new"))

    assert not result.cached
    assert result.lines[0].text == "new"


def test_cache_is_bounded():
    engine = RenderEngine()
    problems = [
        Problem(title=f"P{i}", title_slug=f"p{i}", content=f"<p>{i}</p>")
        for i in range(CACHE_SIZE + 1)
    ]
    for problem in problems:
        engine.render(problem)

    # The first problem was evicted, the most recent ones stay cached
    assert engine.render(problems[-1]).cached
    assert not engine.render(problems[0]).cached


def test_recently_viewed_problem_stays_cached():
    engine = RenderEngine()
    first = Problem(title="First", title_slug="first", content="first")
    engine.render(first)
    for i in range(CACHE_SIZE - 1):
        engine.render(Problem(title=f"P{i}", title_slug=f"p{i}", content=str(i)))

    engine.render(first)
    engine.render(Problem(title="Extra", title_slug="extra", content="extra"))

    assert engine.render(first).cached


def test_clear_cache(sample_problem):
    engine = RenderEngine()
    engine.render(sample_problem)
    engine.clear_cache()

    assert not engine.render(sample_problem).cached


def test_theme_from_config():
    engine = RenderEngine(RenderingConfig(code_color="magenta", bullet="-"))
    result = engine.render(Problem(title="T", content="<code>x</code><ul><li>y</li></ul>"))

    assert result.lines[0].runs[0].style.fg == "magenta"
    assert result.lines[1].text == "  - y"
