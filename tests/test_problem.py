# =============================================================================
# Problem Model Tests
# =============================================================================

import pytest

from kata_tui.core import Problem, ProblemError


def test_from_enveloped_payload(sample_payload, sample_problem_html):
    problem = Problem.from_dict(sample_payload)

    assert problem.title == "Two Sum"
    assert problem.title_slug == "two-sum"
    assert problem.question_id == "1"
    assert problem.frontend_question_id == "1"
    assert problem.difficulty == "Easy"
    assert problem.content == sample_problem_html
    assert problem.is_paid_only is False
    assert [tag.name for tag in problem.topic_tags] == ["Array", "Hash Table"]
    assert problem.topic_tags[1].slug == "hash-table"
    assert problem.hints == ["Try a hash map."]


def test_from_bare_payload(sample_payload):
    question = sample_payload["data"]["question"]
    assert Problem.from_dict(question).title == "Two Sum"


def test_alternate_frontend_id_key():
    problem = Problem.from_dict({"title": "X", "frontendQuestionId": "42"})
    assert problem.display_title == "42. X"


def test_nulls_become_defaults():
    problem = Problem.from_dict({
        "title": "Locked",
        "content": None,
        "isPaidOnly": True,
        "topicTags": None,
        "hints": None,
    })

    assert problem.content is None
    assert problem.is_paid_only
    assert problem.topic_tags == []
    assert problem.hints == []
    assert not problem.has_content


@pytest.mark.parametrize("payload", [
    [],
    "text",
    None,
    {"data": {"question": None}},
    {"data": {}},
    {"content": "<p>no title</p>"},
])
def test_invalid_payloads(payload):
    with pytest.raises(ProblemError):
        Problem.from_dict(payload)


@pytest.mark.parametrize("content", [42, ["<p>a</p>"], {"html": "<p>a</p>"}])
def test_non_string_content_is_rejected(content):
    with pytest.raises(ProblemError, match="content must be a string"):
        Problem.from_dict({"title": "Two Sum", "content": content})


def test_status_helpers():
    assert Problem(title="a", status="ac").is_solved
    assert Problem(title="a", status="notac").is_attempted
    fresh = Problem(title="a")
    assert not fresh.is_solved
    assert not fresh.is_attempted


def test_display_title_without_number():
    assert Problem(title="Scratch").display_title == "Scratch"


def test_from_markup():
    problem = Problem.from_markup("<p>hi</p>", title="notes")

    assert problem.title == "notes"
    assert problem.content == "<p>hi</p>"
    assert problem.has_content
