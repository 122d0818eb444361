"""File-backed repositories for registration, directory and roster data."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Mapping

from roster_checker.config import SETTINGS, Settings
from roster_checker.domain.identifiers import CourseId, StudentId
from roster_checker.domain.models import Course, Student
from roster_checker.domain.repositories import (
    CourseRosterRepository,
    RegistrationRepository,
    StudentDirectoryRepository,
)
from roster_checker.infrastructure.parsing.courses import parse_courses, read_roster_workbook
from roster_checker.infrastructure.parsing.registrations import parse_registered_courses
from roster_checker.infrastructure.parsing.students import parse_students
from roster_checker.infrastructure.parsing.tables import decode_text, parse_csv
from roster_checker.infrastructure.parsing.utils import ensure_bytes


class CsvRegistrationRepository(RegistrationRepository):
    def __init__(self, source: BytesIO | Path | bytes, settings: Settings = SETTINGS) -> None:
        self._source = ensure_bytes(source)
        self._settings = settings

    def registered_course_ids(self) -> Mapping[StudentId, CourseId]:
        table = parse_csv(decode_text(self._source, self._settings.csv_encodings))
        return parse_registered_courses(table, self._settings)


class CsvStudentDirectoryRepository(StudentDirectoryRepository):
    def __init__(self, source: BytesIO | Path | bytes, settings: Settings = SETTINGS) -> None:
        self._source = ensure_bytes(source)
        self._settings = settings

    def students(self) -> Mapping[StudentId, Student]:
        table = parse_csv(decode_text(self._source, self._settings.csv_encodings))
        return parse_students(table, self._settings)


class ExcelCourseRosterRepository(CourseRosterRepository):
    def __init__(self, source: BytesIO | Path | bytes, settings: Settings = SETTINGS) -> None:
        self._source = ensure_bytes(source)
        self._settings = settings

    def courses(self) -> Mapping[CourseId, Course]:
        return parse_courses(read_roster_workbook(self._source), self._settings)
