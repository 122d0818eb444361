"""Mail link construction for students who need to fix their registration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence
from urllib.parse import quote

from roster_checker.domain.models import (
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentInWrongCourse,
)
from roster_checker.domain.results import DiscrepancyEntry
from roster_checker.infrastructure.storage.template_store import EmailTemplates

# Characters left alone by JavaScript's encodeURIComponent.
_UNRESERVED = "!~*'()"


@dataclass(frozen=True)
class MailtoParams:
    recipients: Sequence[str] = field(default_factory=tuple)
    cc: Sequence[str] = field(default_factory=tuple)
    bcc: Sequence[str] = field(default_factory=tuple)
    subject: str = ""
    body: str = ""


def _encode(value: str) -> str:
    return quote(value, safe=_UNRESERVED)


def create_mailto_uri(params: MailtoParams) -> str:
    return (
        "mailto:"
        + ",".join(_encode(r) for r in params.recipients)
        + "?cc="
        + ",".join(_encode(r) for r in params.cc)
        + "&bcc="
        + ",".join(_encode(r) for r in params.bcc)
        + "&subject="
        + _encode(params.subject)
        + "&body="
        + _encode(params.body)
    )


def _fill(template: str, variables: Sequence[tuple[str, str]]) -> str:
    for pattern, replacement in variables:
        template = template.replace(pattern, replacement)
    return template


def fill_wrong_course_template(template: str, item: StudentInWrongCourse | StudentInUnknownCourse) -> str:
    if isinstance(item, StudentInWrongCourse):
        registered_id, registered_target = item.registered_course.id, item.registered_course.target_name
    else:
        registered_id, registered_target = item.unknown_course_id, ""
    return _fill(
        template,
        [
            ("$student_id", item.student.id),
            ("$student_name", item.student.name),
            ("$expected_course_id", item.expected_course.id),
            ("$expected_course_target", item.expected_course.target_name),
            ("$registered_course_id", registered_id),
            ("$registered_course_target", registered_target),
        ],
    )


def fill_no_course_template(template: str, item: StudentInNoCourse) -> str:
    return _fill(
        template,
        [
            ("$student_id", item.student.id),
            ("$student_name", item.student.name),
            ("$expected_course_id", item.expected_course.id),
            ("$expected_course_target", item.expected_course.target_name),
        ],
    )


def compose_mailto(item: DiscrepancyEntry, templates: EmailTemplates, subject: str) -> str | None:
    """Build a mail link for an entry, or None when there is nobody to write to."""
    if isinstance(item, (StudentInWrongCourse, StudentInUnknownCourse)):
        body = fill_wrong_course_template(templates.wrong_course, item)
    elif isinstance(item, StudentInNoCourse):
        body = fill_no_course_template(templates.no_course, item)
    else:
        return None
    return create_mailto_uri(
        MailtoParams(
            recipients=[item.student.school_email],
            cc=[item.student.personal_email],
            subject=subject,
            body=body,
        )
    )
