"""Unit tests for story payload mapping."""

from __future__ import annotations

import pytest

from jira_testgen.core.stories import UserStory, filter_stories


class TestUserStory:
    def test_from_snake_case_payload(self):
        story = UserStory.from_payload(
            {
                "id": "JIRA-101",
                "title": "OAuth",
                "description": "Log in with Google",
                "priority": "High",
                "status": "In Progress",
                "assignee": "Sarah Lee",
                "due_date": "2023-08-15",
                "epic_link": "User Management",
                "tags": ["auth"],
            }
        )

        assert story.priority == "High"
        assert story.status == "In Progress"
        assert story.epic_link == "User Management"
        assert story.generation_prompt == "OAuth - Log in with Google"
        assert story.acceptance_criteria == "Epic: User Management"

    def test_from_jira_style_payload(self):
        story = UserStory.from_payload(
            {
                "key": "PROJ-7",
                "summary": "Search",
                "priority": {"name": "Lowest"},
                "status": {"name": "Done"},
                "assignee": {"displayName": "Emily Johnson"},
                "dueDate": "2023-08-05",
                "labels": ["backend"],
            }
        )

        assert (story.id, story.title) == ("PROJ-7", "Search")
        assert story.priority == "Lowest"
        assert story.status == "Done"
        assert story.assignee == "Emily Johnson"
        assert story.due_date == "2023-08-05"
        assert story.tags == ["backend"]
        assert story.acceptance_criteria is None

    def test_unknown_priority_and_status_fall_back(self):
        story = UserStory.from_payload({"id": "X-1", "priority": "Urgent", "status": "Review"})

        assert story.priority == "Medium"
        assert story.status == "To Do"
        assert story.assignee == "Unassigned"

    def test_single_string_tag_is_kept_whole(self):
        story = UserStory.from_payload({"id": "JIRA-1", "tags": "auth"})

        assert story.tags == ["auth"]
        assert story.matches("auth")
        assert not story.matches("x")

    def test_payload_without_id_is_rejected(self):
        with pytest.raises(ValueError):
            UserStory.from_payload({"title": "No id"})

    def test_filter_stories(self):
        stories = [
            UserStory(id="JIRA-101", title="OAuth login", tags=["security"]),
            UserStory(id="JIRA-102", title="Dashboard", tags=["charts"]),
        ]

        assert [s.id for s in filter_stories(stories, "dash")] == ["JIRA-102"]
        assert [s.id for s in filter_stories(stories, "CHARTS")] == ["JIRA-102"]
        assert [s.id for s in filter_stories(stories, "jira-101")] == ["JIRA-101"]
        assert filter_stories(stories, "nothing") == []
