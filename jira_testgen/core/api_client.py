"""Client for the test-case generation backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from jira_testgen.config import settings
from jira_testgen.core.stories import UserStory
from jira_testgen.core.templates import render_template
from jira_testgen.utils.logger import logger
from jira_testgen.utils.validators import JiraCredentials

AUTH_ERROR = "Error authenticating with JIRA, Please check your credentials"
STORIES_ERROR = "Error connecting with JIRA, Please check your credentials for JIRA ID"
GENERATION_ERROR = "Error generating test cases"


class BackendError(RuntimeError):
    """Raised when a backend call fails; the message is safe to show to users."""


@dataclass
class GenerationResult:
    content: str
    token_count: int = 0


def _stories_from_response(data: Any) -> List[UserStory]:
    if isinstance(data, dict):
        data = data.get("stories", data.get("issues"))
    if not isinstance(data, list):
        raise ValueError("Unexpected stories payload")
    return [UserStory.from_payload(item) for item in data]


class BackendClient:
    """Talks to the generation backend that fronts Jira and the LLM."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.backend.base_url).rstrip("/")
        self.timeout = timeout or settings.backend.timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _post(self, endpoint: str, payload: Dict[str, Any], error_message: str) -> Any:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            logger.error("Backend request to {} failed: {}", endpoint, exc)
            raise BackendError(error_message) from exc

    def authenticate(self, credentials: JiraCredentials) -> Dict[str, Any]:
        data = self._post(
            "/authenticate",
            {
                "domain": credentials.domain,
                "email": credentials.email,
                "jira_token": credentials.token,
            },
            AUTH_ERROR,
        )
        logger.info("Authenticated {} against {}", credentials.email, credentials.domain)
        return data if isinstance(data, dict) else {"result": data}

    def fetch_stories(self, credentials: JiraCredentials, jira_id: str) -> List[UserStory]:
        data = self._post(
            "/fetch-stories",
            {
                "domain": credentials.domain,
                "email": credentials.email,
                "jira_id": jira_id,
                "jira_token": credentials.token,
            },
            STORIES_ERROR,
        )
        try:
            stories = _stories_from_response(data)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.error("Malformed stories payload for {}: {}", jira_id, exc)
            raise BackendError(STORIES_ERROR) from exc
        logger.info("Fetched {} stories for {}", len(stories), jira_id)
        return stories

    def generate_test_cases(self, story: UserStory) -> GenerationResult:
        payload: Dict[str, Any] = {
            "jira_id": story.id,
            "user_story": story.generation_prompt,
        }
        if story.acceptance_criteria:
            payload["acceptance_criteria"] = story.acceptance_criteria

        data = self._post("/generate-test-cases", payload, GENERATION_ERROR)
        if not isinstance(data, dict) or not isinstance(data.get("content"), str):
            logger.error("Generation response for {} has no content", story.id)
            raise BackendError(GENERATION_ERROR)

        result = GenerationResult(
            content=data["content"],
            token_count=int(data.get("token_count") or 0),
        )
        logger.info("Generated test cases for {} ({} tokens)", story.id, result.token_count)
        return result


DEMO_STORIES: List[Dict[str, Any]] = [
    {
        "id": "JIRA-101",
        "title": "Implement user authentication with OAuth 2.0",
        "description": (
            "As a user, I want to be able to log in using my Google or Facebook account, "
            "so that I don't have to remember another password."
        ),
        "priority": "High",
        "status": "In Progress",
        "assignee": "Sarah Lee",
        "due_date": "2023-08-15",
        "epic_link": "User Management",
        "tags": ["authentication", "security", "frontend"],
    },
    {
        "id": "JIRA-102",
        "title": "Create responsive dashboard with analytics widgets",
        "description": (
            "As a marketing manager, I want to see key performance indicators on a "
            "dashboard, so that I can make data-driven decisions."
        ),
        "priority": "Medium",
        "status": "To Do",
        "assignee": "David Wong",
        "due_date": "2023-08-20",
        "epic_link": "Analytics Platform",
        "tags": ["dashboard", "frontend", "charts"],
    },
    {
        "id": "JIRA-103",
        "title": "Optimize database queries for product search",
        "description": (
            "Search results must return in under 200ms regardless of catalog size."
        ),
        "priority": "Highest",
        "status": "Blocked",
        "assignee": "Michael Chen",
        "due_date": "2023-08-10",
        "tags": ["backend", "database", "performance"],
    },
]


class DemoBackendClient(BackendClient):
    """Offline stand-in that serves sample stories and canned generator output."""

    def __init__(self) -> None:
        self.base_url = "demo://local"
        self.timeout = 0.0

    def authenticate(self, credentials: JiraCredentials) -> Dict[str, Any]:
        logger.info("Demo mode: accepting credentials for {}", credentials.email)
        return {"message": "Authenticated (demo mode)"}

    def fetch_stories(self, credentials: JiraCredentials, jira_id: str) -> List[UserStory]:
        return _stories_from_response(DEMO_STORIES)

    def generate_test_cases(self, story: UserStory) -> GenerationResult:
        content = render_template("test_cases", {"story_id": story.id, "story_title": story.title})
        if not content:
            raise BackendError(GENERATION_ERROR)
        return GenerationResult(content=content, token_count=len(content.split()))


def create_client() -> BackendClient:
    if settings.app.demo_mode:
        return DemoBackendClient()
    return BackendClient()


__all__ = [
    "BackendClient",
    "DemoBackendClient",
    "BackendError",
    "GenerationResult",
    "create_client",
    "DEMO_STORIES",
]
