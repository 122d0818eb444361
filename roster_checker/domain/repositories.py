"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Mapping, Protocol

from .identifiers import CourseId, StudentId
from .models import Course, Student


class RegistrationRepository(Protocol):
    """Provides the course each student is actually registered for."""

    def registered_course_ids(self) -> Mapping[StudentId, CourseId]:
        ...


class StudentDirectoryRepository(Protocol):
    """Provides student contact details keyed by student id."""

    def students(self) -> Mapping[StudentId, Student]:
        ...


class CourseRosterRepository(Protocol):
    """Provides courses with their expected rosters."""

    def courses(self) -> Mapping[CourseId, Course]:
        ...
