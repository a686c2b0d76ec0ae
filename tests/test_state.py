"""Unit tests for the board session state."""

from __future__ import annotations

from jira_testgen.core.api_client import GenerationResult
from jira_testgen.core.stories import UserStory
from jira_testgen.utils.state import BoardState
from jira_testgen.utils.validators import JiraCredentials

CREDENTIALS = JiraCredentials(domain="acme.atlassian.net", email="qa@acme.io", token="secret")

CONTENT = """##### **Test Case ID: TC_1**
- **Test Case:** Check
- **Test Execution Steps:**
  1. Step
- **Expected Outcome:** Works
- **Pass/Fail Criteria:**
  - **Pass:** ok
"""


def connected_state() -> BoardState:
    state = BoardState()
    state.connect(
        CREDENTIALS,
        "PROJ",
        [
            UserStory(id="PROJ-1", title="OAuth login", tags=["security"]),
            UserStory(id="PROJ-2", title="Dashboard", tags=["frontend"]),
        ],
    )
    return state


class TestBoardState:
    def test_connect_and_disconnect(self):
        state = connected_state()
        assert state.is_authenticated
        assert len(state.stories) == 2

        state.disconnect()
        assert not state.is_authenticated
        assert state.stories == []
        assert state.generations == {}

    def test_search_filters_case_insensitively(self):
        state = connected_state()

        state.search_term = "proj-2"
        assert [s.id for s in state.filtered_stories()] == ["PROJ-2"]
        state.search_term = "SECUR"
        assert [s.id for s in state.filtered_stories()] == ["PROJ-1"]
        state.search_term = ""
        assert len(state.filtered_stories()) == 2

    def test_new_generation_replaces_previous(self):
        state = connected_state()
        state.store_generation("PROJ-1", GenerationResult(content="nothing useful", token_count=3))
        assert state.test_cases_for("PROJ-1") == []

        state.store_generation("PROJ-1", GenerationResult(content=CONTENT, token_count=30))

        assert state.selected_story_id == "PROJ-1"
        assert state.selected_story().title == "OAuth login"
        assert [r.id for r in state.test_cases_for("PROJ-1")] == ["TC_1"]

    def test_close_keeps_generated_output(self):
        state = connected_state()
        state.store_generation("PROJ-1", GenerationResult(content=CONTENT))
        state.close_test_cases()

        assert state.selected_story() is None
        assert "PROJ-1" in state.generations

    def test_unknown_story_has_no_test_cases(self):
        assert connected_state().test_cases_for("NOPE-1") == []
