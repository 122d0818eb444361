"""Domain models for registration reconciliation.

These dataclasses capture the normalized roster, directory and discrepancy
records. All of them are frozen; a report keeps the course and student values
it was built from.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .identifiers import CourseId, Email, StudentId

WRONG_COURSE = "wrong_course"
NO_COURSE = "no_course"
UNKNOWN_COURSE = "unknown_course"
WITHOUT_DETAILS = "without_details"


@dataclass(frozen=True)
class Student:
    """Directory entry for a single student."""

    id: StudentId
    name: str
    school_email: Email
    personal_email: Email


@dataclass(frozen=True)
class Course:
    """A course and the roster of students expected to register for it."""

    id: CourseId
    name: str
    expected_students: tuple[StudentId, ...] = field(default_factory=tuple)
    target_name: str = ""


@dataclass(frozen=True)
class StudentInWrongCourse:
    student: Student
    registered_course: Course
    expected_course: Course

    @property
    def issue_type(self) -> str:
        return WRONG_COURSE


@dataclass(frozen=True)
class StudentInNoCourse:
    student: Student
    expected_course: Course

    @property
    def issue_type(self) -> str:
        return NO_COURSE


@dataclass(frozen=True)
class StudentInUnknownCourse:
    """Student registered for a course id that no roster sheet defines."""

    student: Student
    unknown_course_id: CourseId
    expected_course: Course

    @property
    def issue_type(self) -> str:
        return UNKNOWN_COURSE


@dataclass(frozen=True)
class StudentWithoutDetails:
    """Rostered student id with no directory entry."""

    student_id: StudentId
    expected_course: Course

    @property
    def issue_type(self) -> str:
        return WITHOUT_DETAILS
