"""User story records as returned by the generation backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

PRIORITIES: List[str] = ["Highest", "High", "Medium", "Low", "Lowest"]
STATUSES: List[str] = ["To Do", "In Progress", "Done", "Blocked"]

PRIORITY_COLORS: Dict[str, str] = {
    "Highest": "red",
    "High": "orange",
    "Medium": "blue",
    "Low": "green",
    "Lowest": "gray",
}

STATUS_COLORS: Dict[str, str] = {
    "To Do": "gray",
    "In Progress": "blue",
    "Done": "green",
    "Blocked": "red",
}


def _first(payload: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = payload.get(key)
        if value not in (None, ""):
            return value
    return default


def _as_name(value: Any) -> str:
    # Jira REST nests names: {"displayName": ...} or {"name": ...}
    if isinstance(value, dict):
        return str(value.get("displayName") or value.get("name") or "")
    return str(value) if value is not None else ""


@dataclass
class UserStory:
    id: str
    title: str
    description: str = ""
    priority: str = "Medium"
    status: str = "To Do"
    assignee: str = ""
    due_date: str = ""
    epic_link: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "UserStory":
        """Build a story from a backend entry, accepting snake, camel and Jira keys."""
        story_id = _first(payload, "id", "key", "jira_id")
        if story_id is None:
            raise ValueError("Story payload has no id")

        priority = _as_name(_first(payload, "priority", default="Medium"))
        status = _as_name(_first(payload, "status", default="To Do"))
        tags = _first(payload, "tags", "labels", default=[])
        if isinstance(tags, str):
            tags = [tags]

        return cls(
            id=str(story_id),
            title=str(_first(payload, "title", "summary", default="")),
            description=str(_first(payload, "description", default="")),
            priority=priority if priority in PRIORITIES else "Medium",
            status=status if status in STATUSES else "To Do",
            assignee=_as_name(_first(payload, "assignee", default="")) or "Unassigned",
            due_date=str(_first(payload, "due_date", "dueDate", "duedate", default="")),
            epic_link=_first(payload, "epic_link", "epicLink", "epic"),
            tags=[str(tag) for tag in tags],
        )

    @property
    def generation_prompt(self) -> str:
        return f"{self.title} - {self.description}"

    @property
    def acceptance_criteria(self) -> Optional[str]:
        return f"Epic: {self.epic_link}" if self.epic_link else None

    def matches(self, term: str) -> bool:
        """Case-insensitive search over id, title and tags."""
        needle = term.strip().lower()
        if not needle:
            return True
        return (
            needle in self.id.lower()
            or needle in self.title.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )


def filter_stories(stories: Iterable[UserStory], term: str) -> List[UserStory]:
    return [story for story in stories if story.matches(term)]


__all__ = [
    "UserStory",
    "filter_stories",
    "PRIORITIES",
    "STATUSES",
    "PRIORITY_COLORS",
    "STATUS_COLORS",
]
