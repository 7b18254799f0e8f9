# =============================================================================
# Problem Model
# =============================================================================
# Represents a coding problem as served by the problem site's API.
#
# The description ("content") is an HTML fragment in a small, predictable
# dialect; the rendering package turns it into terminal lines. Everything
# else here is metadata for the title bar: difficulty, solve status, and
# topic tags.
#
# The API speaks camelCase JSON. Payloads arrive either as the bare
# question object or wrapped in a GraphQL envelope:
#
#   {"data": {"question": {"questionId": "1", "title": "Two Sum", ...}}}
# =============================================================================

from dataclasses import dataclass, field
from typing import Any


class ProblemError(Exception):
    """Raised when a payload can't be interpreted as a problem."""
    pass


@dataclass
class TopicTag:
    """A topic label such as "Array" or "Dynamic Programming"."""
    name: str
    slug: str = ""


@dataclass
class Problem:
    """
    A single problem and its description.

    Attributes:
        title: Human-readable title ("Two Sum").
        title_slug: URL slug ("two-sum"), also used as a cache key.
        question_id: Internal numeric id (as a string).
        frontend_question_id: The number shown to users.
        difficulty: "Easy", "Medium" or "Hard".
        content: Description HTML. None for premium problems when not
                 signed in, or when the API returned nothing.
        is_paid_only: Premium problem.
        status: "ac" (solved), "notac" (attempted) or None.
        topic_tags: Topic labels.
        hints: HTML hint fragments.
    """
    title: str
    title_slug: str = ""
    question_id: str = ""
    frontend_question_id: str = ""
    difficulty: str = ""
    content: str | None = None
    is_paid_only: bool = False
    status: str | None = None
    topic_tags: list[TopicTag] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Any) -> "Problem":
        """
        Build a Problem from an API payload.

        Args:
            data: Parsed JSON, either the question object itself or a
                  {"data": {"question": {...}}} envelope.

        Raises:
            ProblemError: If the payload doesn't contain a question.
        """
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            data = data["data"].get("question")

        if not isinstance(data, dict):
            raise ProblemError("Payload does not contain a question object")
        if not data.get("title"):
            raise ProblemError("Question has no title")

        content = data.get("content")
        if content is not None and not isinstance(content, str):
            raise ProblemError(f"Question content must be a string, got {type(content).__name__}")

        tags = [
            TopicTag(name=tag.get("name", ""), slug=tag.get("slug", ""))
            for tag in data.get("topicTags") or []
            if isinstance(tag, dict)
        ]

        return cls(
            title=str(data["title"]),
            title_slug=str(data.get("titleSlug") or ""),
            question_id=str(data.get("questionId") or ""),
            frontend_question_id=str(data.get("questionFrontendId") or data.get("frontendQuestionId") or ""),
            difficulty=str(data.get("difficulty") or ""),
            content=content,
            is_paid_only=bool(data.get("isPaidOnly", False)),
            status=data.get("status"),
            topic_tags=tags,
            hints=list(data.get("hints") or []),
        )

    @classmethod
    def from_markup(cls, markup: str, title: str) -> "Problem":
        """Wrap a bare HTML description (e.g. a saved file) as a Problem."""
        return cls(title=title, content=markup)

    # -------------------------------------------------------------------------
    # Display Helpers
    # -------------------------------------------------------------------------

    @property
    def display_title(self) -> str:
        """Title prefixed with the problem number, e.g. "1. Two Sum"."""
        if self.frontend_question_id:
            return f"{self.frontend_question_id}. {self.title}"
        return self.title

    @property
    def is_solved(self) -> bool:
        return self.status == "ac"

    @property
    def is_attempted(self) -> bool:
        return self.status == "notac"

    @property
    def has_content(self) -> bool:
        """True if there is a non-empty description to render."""
        return bool(self.content and self.content.strip())
