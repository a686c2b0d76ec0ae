"""Extract structured test cases from generator markdown.

The generator answers with a loosely formatted markdown document::

    #### **Test Scenario ID: TS_1**
    **Test Scenario:** Login with OAuth

    ##### **Test Case ID: TC_1**
    - **Test Case:** Valid Google login
    - **Preconditions:** User has a Google account
    - **Test Execution Steps:**
      1. Open the login page
      2. Click "Sign in with Google"
    - **Expected Outcome:** The dashboard is shown
    - **Pass/Fail Criteria:**
      - **Pass:** Dashboard visible
      - **Fail:** Error shown
    - **Priority:** High

Blocks that do not follow this layout are skipped. Extraction never raises,
so a partially broken answer still yields every block that is readable.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from jira_testgen.utils.logger import logger

UNGROUPED_SCENARIO_ID = "ungrouped"

_SCENARIO_HEADER = re.compile(r"#### \*\*Test Scenario ID: (TS_[0-9]+)\*\*")
_SCENARIO_WITH_TITLE = re.compile(
    r"#### \*\*Test Scenario ID: (?P<id>TS_[0-9]+)\*\*\s*\n"
    r"\*\*Test Scenario:\*\* (?P<title>.*?)(?=\n)"
)
_TEST_CASE_HEADER = re.compile(r"##### \*\*Test Case ID:")
_TEST_CASE_BLOCK = re.compile(
    r"##### \*\*Test Case ID: (?P<id>TC_[0-9]+)\*\*\s*\n"
    r"- \*\*Test Case:\*\* (?P<title>.*?)\n"
    r"(?:- \*\*Preconditions:\*\* (?P<preconditions>.*?)\n)?"
    r"(?:- \*\*Test Data:\*\* (?P<test_data>.*?)\n)?"
    r"- \*\*Test Execution Steps:\*\*\s*\n"
    r"(?P<steps>[\s\S]*?)"
    r"(?=- \*\*Expected Outcome:|\*\*Expected Outcome:)"
    r"(?:- )?\*\*Expected Outcome:\*\*\s*"
    r"(?P<expected>[\s\S]*?)"
    r"(?=- \*\*Pass/Fail Criteria:|-\s\*\*Pass/Fail|\*\*Pass/Fail)"
    r"(?:- )?\*\*Pass/Fail Criteria:\*\*\s*\n"
    r"(?:\s*- \*\*Pass:\*\* (?P<pass_criteria>.*?)\n)?"
    r"(?:\s*- \*\*Fail:\*\* (?P<fail_criteria>.*?)\n)?"
    r"(?:- \*\*Priority:\*\* (?P<priority>.*?)\n)?"
    r"(?:- \*\*References:\*\* (?P<references>.*?)(?=\n\n|\n#|\n\Z|\Z))?"
)
_STEP = re.compile(r"[0-9]+\.\s*(.*?)(?=\n\s*[0-9]+\.|\n\s*\Z|\Z)", re.DOTALL)

_OPTIONAL_FIELDS = (
    "preconditions",
    "test_data",
    "priority",
    "references",
    "pass_criteria",
    "fail_criteria",
)


@dataclass(frozen=True)
class ScenarioGroup:
    id: str
    title: str = ""


@dataclass
class TestCaseRecord:
    """One generated test case."""

    __test__ = False  # not a pytest test class

    id: str
    title: str
    steps: List[str] = field(default_factory=list)
    expected_result: str = ""
    preconditions: Optional[str] = None
    test_data: Optional[str] = None
    priority: Optional[str] = None
    references: Optional[str] = None
    pass_criteria: Optional[str] = None
    fail_criteria: Optional[str] = None
    scenario_id: str = UNGROUPED_SCENARIO_ID
    scenario: str = ""

    def as_dict(self) -> Dict[str, Any]:
        """Camel-cased mapping; optional fields appear only when set."""
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "steps": list(self.steps),
            "expectedResult": self.expected_result,
            "scenarioId": self.scenario_id,
            "scenario": self.scenario,
        }
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[_camel(name)] = value
        return data


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _strip_optional(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class _ScenarioIndex:
    """Scenario titles and header offsets of a single document."""

    def __init__(self, text: str) -> None:
        self.titles: Dict[str, str] = {}
        for match in _SCENARIO_WITH_TITLE.finditer(text):
            self.titles[match.group("id")] = match.group("title").strip()

        headers: List[Tuple[int, str]] = [
            (match.end(), match.group(1)) for match in _SCENARIO_HEADER.finditer(text)
        ]
        self._ends = [end for end, _ in headers]
        self._ids = [scenario_id for _, scenario_id in headers]

    def scenario_at(self, position: int) -> ScenarioGroup:
        """Return the last scenario header that ends at or before ``position``."""
        index = bisect_right(self._ends, position)
        if index == 0:
            return ScenarioGroup(UNGROUPED_SCENARIO_ID)
        scenario_id = self._ids[index - 1]
        return ScenarioGroup(scenario_id, self.titles.get(scenario_id, ""))


def extract_scenarios(raw_text: Optional[str]) -> List[ScenarioGroup]:
    """Return the titled scenarios of a document in order of first appearance."""
    if not raw_text:
        return []
    titles = _ScenarioIndex(raw_text).titles
    return [ScenarioGroup(scenario_id, title) for scenario_id, title in titles.items()]


def parse_steps(steps_text: Optional[str]) -> List[str]:
    """Split a numbered list into trimmed step texts."""
    if not steps_text:
        return []
    return [match.group(1).strip() for match in _STEP.finditer(steps_text.strip())]


def _block_bounds(text: str) -> List[Tuple[int, int]]:
    starts = [match.start() for match in _TEST_CASE_HEADER.finditer(text)]
    ends = starts[1:] + [len(text)]
    return list(zip(starts, ends))


def extract_test_cases(raw_text: Optional[str]) -> List[TestCaseRecord]:
    """Parse generator markdown into test case records in document order."""
    if not raw_text:
        return []

    scenarios = _ScenarioIndex(raw_text)
    records: List[TestCaseRecord] = []

    for start, end in _block_bounds(raw_text):
        match = _TEST_CASE_BLOCK.match(raw_text, start, end)
        if match is None:
            logger.debug("Skipping unrecognised test case block at offset {}", start)
            continue

        scenario = scenarios.scenario_at(start)
        records.append(
            TestCaseRecord(
                id=match.group("id").strip(),
                title=match.group("title").strip(),
                steps=parse_steps(match.group("steps")),
                expected_result=(match.group("expected") or "").strip(),
                preconditions=_strip_optional(match.group("preconditions")),
                test_data=_strip_optional(match.group("test_data")),
                priority=_strip_optional(match.group("priority")),
                references=_strip_optional(match.group("references")),
                pass_criteria=_strip_optional(match.group("pass_criteria")),
                fail_criteria=_strip_optional(match.group("fail_criteria")),
                scenario_id=scenario.id,
                scenario=scenario.title,
            )
        )

    logger.debug(
        "Extracted {} test cases across {} scenarios", len(records), len(scenarios.titles)
    )
    return records


__all__ = [
    "UNGROUPED_SCENARIO_ID",
    "ScenarioGroup",
    "TestCaseRecord",
    "extract_scenarios",
    "extract_test_cases",
    "parse_steps",
]
