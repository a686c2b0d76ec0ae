"""State container for the story board session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from jira_testgen.core.api_client import GenerationResult
from jira_testgen.core.stories import UserStory, filter_stories
from jira_testgen.core.testcase_parser import TestCaseRecord, extract_test_cases
from jira_testgen.utils.validators import JiraCredentials


@dataclass
class BoardState:
    """Mutable board state stored in Streamlit session."""

    credentials: Optional[JiraCredentials] = None
    jira_id: str = ""
    stories: List[UserStory] = field(default_factory=list)
    search_term: str = ""
    selected_story_id: Optional[str] = None
    generations: Dict[str, GenerationResult] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.credentials is not None

    def connect(self, credentials: JiraCredentials, jira_id: str, stories: List[UserStory]) -> None:
        self.credentials = credentials
        self.jira_id = jira_id
        self.stories = list(stories)
        self.search_term = ""
        self.selected_story_id = None
        self.generations.clear()

    def disconnect(self) -> None:
        self.credentials = None
        self.jira_id = ""
        self.stories = []
        self.search_term = ""
        self.selected_story_id = None
        self.generations.clear()

    def filtered_stories(self) -> List[UserStory]:
        return filter_stories(self.stories, self.search_term)

    def get_story(self, story_id: str) -> Optional[UserStory]:
        return next((story for story in self.stories if story.id == story_id), None)

    def selected_story(self) -> Optional[UserStory]:
        if self.selected_story_id is None:
            return None
        return self.get_story(self.selected_story_id)

    def store_generation(self, story_id: str, result: GenerationResult) -> None:
        """Replace any earlier output for the story and open its test cases."""
        self.generations[story_id] = result
        self.selected_story_id = story_id

    def test_cases_for(self, story_id: str) -> List[TestCaseRecord]:
        result = self.generations.get(story_id)
        if result is None:
            return []
        return extract_test_cases(result.content)

    def close_test_cases(self) -> None:
        self.selected_story_id = None


__all__ = ["BoardState"]
