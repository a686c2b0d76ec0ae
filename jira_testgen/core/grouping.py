"""Scenario-grouped view over extracted test cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from jira_testgen.core.testcase_parser import UNGROUPED_SCENARIO_ID, TestCaseRecord


@dataclass
class ScenarioSection:
    scenario_id: str
    title: str = ""
    test_cases: List[TestCaseRecord] = field(default_factory=list)

    @property
    def is_ungrouped(self) -> bool:
        return self.scenario_id == UNGROUPED_SCENARIO_ID

    @property
    def heading(self) -> str:
        if self.is_ungrouped:
            return "Ungrouped test cases"
        if self.title:
            return f"{self.scenario_id}: {self.title}"
        return self.scenario_id


def group_by_scenario(records: Iterable[TestCaseRecord]) -> List[ScenarioSection]:
    """Partition records by scenario id and order the groups by that id.

    Records keep their relative order inside a group. Ids compare as plain
    strings, so ``TS_10`` sorts before ``TS_2`` and the ungrouped section
    comes last.
    """
    sections: Dict[str, ScenarioSection] = {}
    for record in records:
        key = record.scenario_id or UNGROUPED_SCENARIO_ID
        section = sections.get(key)
        if section is None:
            section = sections[key] = ScenarioSection(scenario_id=key)
        if not section.title and record.scenario:
            section.title = record.scenario
        section.test_cases.append(record)

    return [sections[key] for key in sorted(sections)]


__all__ = ["ScenarioSection", "group_by_scenario"]
