"""Registration CSV parser producing the student to course index."""
from __future__ import annotations

import logging

from roster_checker.config import SETTINGS, Settings
from roster_checker.domain.errors import BadDeletionValueError
from roster_checker.domain.identifiers import CourseId, StudentId
from roster_checker.infrastructure.parsing.tables import CsvTable

logger = logging.getLogger(__name__)


def parse_registered_courses(table: CsvTable, settings: Settings = SETTINGS) -> dict[StudentId, CourseId]:
    student_id_column = settings.student_id_column
    course_id_column = settings.course_id_column
    deletion_column = settings.deletion_column
    table.require_columns([student_id_column, course_id_column, deletion_column])

    registered: dict[StudentId, CourseId] = {}
    deleted = 0
    for record in table.records:
        marker = record[deletion_column]
        if marker == settings.deleted_marker:
            deleted += 1
            continue
        if marker != settings.active_marker:
            raise BadDeletionValueError(marker)
        registered[StudentId(record[student_id_column])] = CourseId(record[course_id_column])

    logger.debug("loaded %d registrations (%d deleted rows skipped)", len(registered), deleted)
    return registered
