# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Kata-TUI test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from kata_tui.core import Problem, TopicTag
from kata_tui.rendering import Theme


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def xdg_home(temp_dir, monkeypatch):
    """Point every XDG directory at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))
    return temp_dir


@pytest.fixture
def theme():
    """The default rendering theme."""
    return Theme()


@pytest.fixture
def sample_problem_html():
    """A description in the dialect the problem site serves."""
    return (
        "<p>Given an array of integers <code>nums</code>&nbsp;and an integer "
        "<code>target</code>, return <em>indices of the two numbers such that "
        "they add up to <code>target</code></em>.</p>\n"
        "\n"
        "<p>You may assume that each input would have <strong><em>exactly</em> "
        "one solution</strong>.</p>\n"
        "\n"
        "<p>&nbsp;</p>\n"
        "<p><strong class=\"example\">Example 1:</strong></p>\n"
        "\n"
        "<pre>\n"
        "<strong>Input:</strong> nums = [2,7,11,15], target = 9\n"
        "<strong>Output:</strong> [0,1]\n"
        "</pre>\n"
        "\n"
        "<p><strong>Constraints:</strong></p>\n"
        "\n"
        "<ul>\n"
        "\t<li><code>2 &lt;= nums.length &lt;= 10<sup>4</sup></code></li>\n"
        "\t<li><code>-10<sup>9</sup> &lt;= nums[i] &lt;= 10<sup>9</sup></code></li>\n"
        "</ul>\n"
    )


@pytest.fixture
def sample_payload(sample_problem_html):
    """A question detail payload wrapped in its GraphQL envelope."""
    return {
        "data": {
            "question": {
                "questionId": "1",
                "questionFrontendId": "1",
                "title": "Two Sum",
                "titleSlug": "two-sum",
                "difficulty": "Easy",
                "content": sample_problem_html,
                "isPaidOnly": False,
                "status": "ac",
                "topicTags": [
                    {"name": "Array", "slug": "array"},
                    {"name": "Hash Table", "slug": "hash-table"},
                ],
                "hints": ["Try a hash map."],
            }
        }
    }


@pytest.fixture
def sample_problem(sample_problem_html):
    """Create a sample Problem for testing."""
    return Problem(
        title="Two Sum",
        title_slug="two-sum",
        question_id="1",
        frontend_question_id="1",
        difficulty="Easy",
        content=sample_problem_html,
        status="ac",
        topic_tags=[TopicTag("Array", "array"), TopicTag("Hash Table", "hash-table")],
    )


@pytest.fixture
def premium_problem():
    """A premium problem whose description was withheld."""
    return Problem(
        title="Meeting Rooms",
        title_slug="meeting-rooms",
        frontend_question_id="252",
        difficulty="Medium",
        content=None,
        is_paid_only=True,
    )
