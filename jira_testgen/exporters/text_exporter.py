"""Plain-text export of extracted test cases."""

from __future__ import annotations

from typing import Iterable, List

from jira_testgen.core.testcase_parser import TestCaseRecord

SEPARATOR = "-------------------"


def format_test_case(record: TestCaseRecord, indent: str = "  ") -> str:
    """Render one record as labeled lines; unset optional sections are left out."""
    lines: List[str] = [
        f"TEST CASE ID: {record.id}",
        f"TEST CASE: {record.title}",
    ]
    if record.preconditions is not None:
        lines.append(f"PRECONDITIONS: {record.preconditions}")
    if record.test_data is not None:
        lines.append(f"TEST DATA: {record.test_data}")

    lines.append("STEPS:")
    lines.extend(f"{indent}{number}. {step}" for number, step in enumerate(record.steps, start=1))
    lines.append("EXPECTED RESULT:")
    lines.append(f"{indent}{record.expected_result}")

    if record.priority is not None:
        lines.append(f"PRIORITY: {record.priority}")
    if record.references is not None:
        lines.append(f"REFERENCES: {record.references}")
    return "\n".join(lines)


def format_copy_text(record: TestCaseRecord) -> str:
    """Single-record text for the clipboard."""
    return format_test_case(record, indent="")


def format_test_cases(records: Iterable[TestCaseRecord]) -> str:
    blocks = [f"{format_test_case(record)}\n{SEPARATOR}\n" for record in records]
    return "\n".join(blocks)


def export_filename(story_id: str, raw: bool = False) -> str:
    if raw:
        return f"{story_id}-test-cases-raw.txt"
    return f"{story_id}-test-cases.txt"


__all__ = [
    "SEPARATOR",
    "format_test_case",
    "format_copy_text",
    "format_test_cases",
    "export_filename",
]
