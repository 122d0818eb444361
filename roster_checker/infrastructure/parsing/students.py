"""Student directory CSV parser."""
from __future__ import annotations

import logging

from roster_checker.config import SETTINGS, Settings
from roster_checker.domain.identifiers import Email, StudentId
from roster_checker.domain.models import Student
from roster_checker.infrastructure.parsing.tables import CsvTable

logger = logging.getLogger(__name__)


def parse_students(table: CsvTable, settings: Settings = SETTINGS) -> dict[StudentId, Student]:
    table.require_columns(
        [
            settings.student_id_column,
            settings.student_name_column,
            settings.school_email_column,
            settings.personal_email_column,
        ]
    )

    students: dict[StudentId, Student] = {}
    for record in table.records:
        student_id = StudentId(record[settings.student_id_column])
        students[student_id] = Student(
            id=student_id,
            name=record[settings.student_name_column],
            school_email=Email(record[settings.school_email_column]),
            personal_email=Email(record[settings.personal_email_column]),
        )

    logger.debug("loaded %d students from %d rows", len(students), len(table.records))
    return students
