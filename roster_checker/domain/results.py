"""Domain-level results for registration reconciliation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Union

from .models import (
    Course,
    Student,
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentInWrongCourse,
    StudentWithoutDetails,
)

DiscrepancyEntry = Union[
    StudentInWrongCourse,
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentWithoutDetails,
]


@dataclass(frozen=True)
class DiscrepancySummary:
    wrong_course: int
    no_course: int
    unknown_course: int
    without_details: int

    @property
    def total(self) -> int:
        return self.wrong_course + self.no_course + self.unknown_course + self.without_details


@dataclass(frozen=True)
class RegistrationDiscrepancy:
    students_in_wrong_course: Sequence[StudentInWrongCourse] = field(default_factory=tuple)
    students_in_no_course: Sequence[StudentInNoCourse] = field(default_factory=tuple)
    students_in_unknown_course: Sequence[StudentInUnknownCourse] = field(default_factory=tuple)
    students_without_details: Sequence[StudentWithoutDetails] = field(default_factory=tuple)

    def summary(self) -> DiscrepancySummary:
        return DiscrepancySummary(
            wrong_course=len(self.students_in_wrong_course),
            no_course=len(self.students_in_no_course),
            unknown_course=len(self.students_in_unknown_course),
            without_details=len(self.students_without_details),
        )

    def has_issues(self) -> bool:
        return self.summary().total > 0

    def iter_all_discrepancies(self) -> Iterable[DiscrepancyEntry]:
        yield from self.students_in_wrong_course
        yield from self.students_in_no_course
        yield from self.students_in_unknown_course
        yield from self.students_without_details

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "students_in_wrong_course": [
                {
                    "student": _student_dict(item.student),
                    "registered_course": _course_dict(item.registered_course),
                    "expected_course": _course_dict(item.expected_course),
                }
                for item in self.students_in_wrong_course
            ],
            "students_in_no_course": [
                {
                    "student": _student_dict(item.student),
                    "expected_course": _course_dict(item.expected_course),
                }
                for item in self.students_in_no_course
            ],
            "students_in_unknown_course": [
                {
                    "student": _student_dict(item.student),
                    "unknown_course_id": item.unknown_course_id,
                    "expected_course": _course_dict(item.expected_course),
                }
                for item in self.students_in_unknown_course
            ],
            "students_without_details": [
                {
                    "student_id": item.student_id,
                    "expected_course": _course_dict(item.expected_course),
                }
                for item in self.students_without_details
            ],
        }


def _student_dict(student: Student) -> dict[str, str]:
    return {
        "id": student.id,
        "name": student.name,
        "school_email": student.school_email,
        "personal_email": student.personal_email,
    }


def _course_dict(course: Course) -> dict[str, Any]:
    return {
        "id": course.id,
        "name": course.name,
        "expected_students": list(course.expected_students),
        "target_name": course.target_name,
    }
