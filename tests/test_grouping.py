"""Unit tests for the scenario-grouped view."""

from __future__ import annotations

from jira_testgen.core.grouping import group_by_scenario
from jira_testgen.core.testcase_parser import UNGROUPED_SCENARIO_ID, TestCaseRecord


def record(case_id: str, scenario_id: str, scenario: str = "") -> TestCaseRecord:
    return TestCaseRecord(id=case_id, title=case_id, scenario_id=scenario_id, scenario=scenario)


class TestGroupByScenario:
    def test_empty_input(self):
        assert group_by_scenario([]) == []

    def test_groups_sorted_as_strings_with_ungrouped_last(self):
        records = [
            record("TC_1", UNGROUPED_SCENARIO_ID),
            record("TC_2", "TS_2", "Second"),
            record("TC_3", "TS_10", "Tenth"),
            record("TC_4", "TS_1", "First"),
        ]
        sections = group_by_scenario(records)

        assert [s.scenario_id for s in sections] == ["TS_1", "TS_10", "TS_2", UNGROUPED_SCENARIO_ID]
        assert sections[-1].is_ungrouped
        assert sections[-1].heading == "Ungrouped test cases"

    def test_records_keep_source_order_within_group(self):
        records = [
            record("TC_1", "TS_1", "Login"),
            record("TC_2", "TS_2", "Logout"),
            record("TC_3", "TS_1", "Login"),
        ]
        sections = group_by_scenario(records)

        assert [r.id for r in sections[0].test_cases] == ["TC_1", "TC_3"]
        assert sections[0].title == "Login"
        assert sections[0].heading == "TS_1: Login"

    def test_empty_scenario_id_falls_back_to_ungrouped(self):
        sections = group_by_scenario([record("TC_1", "")])

        assert len(sections) == 1
        assert sections[0].scenario_id == UNGROUPED_SCENARIO_ID

    def test_untitled_scenario_heading_is_the_id(self):
        sections = group_by_scenario([record("TC_1", "TS_5")])
        assert sections[0].heading == "TS_5"
