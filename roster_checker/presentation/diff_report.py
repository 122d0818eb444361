"""Report renderers for registration discrepancies."""
from __future__ import annotations

import csv
import html
import io
from typing import Iterable

from roster_checker.domain.models import (
    NO_COURSE,
    UNKNOWN_COURSE,
    WITHOUT_DETAILS,
    WRONG_COURSE,
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentInWrongCourse,
)
from roster_checker.domain.results import DiscrepancyEntry, RegistrationDiscrepancy

COLUMNS = [
    "issue_type",
    "student_id",
    "student_name",
    "school_email",
    "personal_email",
    "expected_course_id",
    "expected_course_name",
    "expected_course_target",
    "registered_course_id",
]

CATEGORY_TITLES = {
    WRONG_COURSE: "Students registered in the wrong course",
    NO_COURSE: "Students without a registration",
    UNKNOWN_COURSE: "Students registered in an unknown course",
    WITHOUT_DETAILS: "Rostered students missing from the directory",
}


def discrepancy_to_row(item: DiscrepancyEntry) -> dict[str, str]:
    course = item.expected_course
    row = dict.fromkeys(COLUMNS, "")
    row.update(
        issue_type=item.issue_type,
        expected_course_id=course.id,
        expected_course_name=course.name,
        expected_course_target=course.target_name,
    )
    if isinstance(item, (StudentInWrongCourse, StudentInNoCourse, StudentInUnknownCourse)):
        student = item.student
        row.update(
            student_id=student.id,
            student_name=student.name,
            school_email=student.school_email,
            personal_email=student.personal_email,
        )
    else:
        row["student_id"] = item.student_id
    if isinstance(item, StudentInWrongCourse):
        row["registered_course_id"] = item.registered_course.id
    elif isinstance(item, StudentInUnknownCourse):
        row["registered_course_id"] = item.unknown_course_id
    return row


def discrepancies_to_rows(items: Iterable[DiscrepancyEntry]) -> list[dict[str, str]]:
    return [discrepancy_to_row(item) for item in items]


def render_csv(report: RegistrationDiscrepancy) -> bytes:
    rows = discrepancies_to_rows(report.iter_all_discrepancies())
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def _render_table(rows: list[dict[str, str]]) -> str:
    header = "".join(f"<th>{html.escape(col)}</th>" for col in COLUMNS)
    body = "".join(
        "<tr>" + "".join(f"<td>{html.escape(row[col])}</td>" for col in COLUMNS) + "</tr>" for row in rows
    )
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body}</tbody></table>"


def render_html(report: RegistrationDiscrepancy) -> str:
    if not report.has_issues():
        return "<p>No discrepancies detected.</p>"
    sections = []
    for issue_type, items in (
        (WRONG_COURSE, report.students_in_wrong_course),
        (NO_COURSE, report.students_in_no_course),
        (UNKNOWN_COURSE, report.students_in_unknown_course),
        (WITHOUT_DETAILS, report.students_without_details),
    ):
        if not items:
            continue
        title = html.escape(CATEGORY_TITLES[issue_type])
        sections.append(f"<h2>{title} ({len(items)})</h2>" + _render_table(discrepancies_to_rows(items)))
    return "".join(sections)
