"""Roster workbook parser producing one course per worksheet."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Mapping
from zipfile import BadZipFile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from roster_checker.config import SETTINGS, Settings
from roster_checker.domain.errors import MissingCellError, UnreadableWorkbookError
from roster_checker.domain.identifiers import CourseId, StudentId
from roster_checker.domain.models import Course
from roster_checker.infrastructure.parsing.utils import clean_cell, ensure_bytes

logger = logging.getLogger(__name__)

COURSE_ID_LABEL_CELL = "course-id-label"
COURSE_ID_CELL = "course-id"
COURSE_NAME_LABEL_CELL = "course-name-label"
COURSE_NAME_CELL = "course-name"
STUDENT_ID_LABEL_CELL = "student-id-label"


def read_roster_workbook(source: BytesIO | bytes) -> dict[str, pd.DataFrame]:
    """Load every sheet of an xlsx workbook as a header-less string grid."""
    raw_bytes = ensure_bytes(source)
    try:
        return pd.read_excel(
            BytesIO(raw_bytes),
            sheet_name=None,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            engine="openpyxl",
        )
    except (BadZipFile, InvalidFileException, KeyError, ValueError) as exc:
        raise UnreadableWorkbookError(str(exc)) from exc


def _find_label(sheet: pd.DataFrame, label: str) -> tuple[int, int] | None:
    rows, cols = sheet.shape
    for row in range(rows):
        for col in range(cols):
            if clean_cell(sheet.iat[row, col]) == label:
                return row, col
    return None


def _value_right_of(sheet: pd.DataFrame, position: tuple[int, int]) -> str | None:
    row, col = position
    if col + 1 >= sheet.shape[1]:
        return None
    value = sheet.iat[row, col + 1]
    # Empty cells are read as "", so only a whitespace-only cell counts as present.
    if value == "" or (not isinstance(value, str) and pd.isna(value)):
        return None
    return clean_cell(value)


def _labelled_value(
    sheet: pd.DataFrame,
    sheet_name: str,
    label: str,
    label_cell: str,
    value_cell: str,
) -> str:
    position = _find_label(sheet, label)
    if position is None:
        raise MissingCellError(label_cell, sheet_name)
    value = _value_right_of(sheet, position)
    if value is None:
        raise MissingCellError(value_cell, sheet_name)
    return value


def _expected_students(sheet: pd.DataFrame, header: tuple[int, int]) -> tuple[StudentId, ...]:
    header_row, col = header
    students: list[StudentId] = []
    for row in range(header_row + 1, sheet.shape[0]):
        text = clean_cell(sheet.iat[row, col])
        if text:
            students.append(StudentId(text))
    return tuple(students)


def parse_course_sheet(sheet: pd.DataFrame, sheet_name: str, settings: Settings = SETTINGS) -> Course:
    course_id = _labelled_value(
        sheet, sheet_name, settings.course_id_label, COURSE_ID_LABEL_CELL, COURSE_ID_CELL
    )
    course_name = _labelled_value(
        sheet, sheet_name, settings.course_name_label, COURSE_NAME_LABEL_CELL, COURSE_NAME_CELL
    )
    header = _find_label(sheet, settings.student_id_label)
    if header is None:
        raise MissingCellError(STUDENT_ID_LABEL_CELL, sheet_name)

    return Course(
        id=CourseId(course_id),
        name=course_name,
        expected_students=_expected_students(sheet, header),
        target_name=sheet_name,
    )


def parse_courses(sheets: Mapping[str, pd.DataFrame], settings: Settings = SETTINGS) -> dict[CourseId, Course]:
    """Parse every sheet; the first sheet that does not fit the layout aborts the parse."""
    courses: dict[CourseId, Course] = {}
    for sheet_name, sheet in sheets.items():
        course = parse_course_sheet(sheet, sheet_name, settings)
        if course.id in courses:
            logger.warning(
                "sheet %r repeats course %s from sheet %r; keeping the later sheet",
                sheet_name,
                course.id,
                courses[course.id].target_name,
            )
        courses[course.id] = course
        logger.debug("sheet %r: course %s expects %d students", sheet_name, course.id, len(course.expected_students))
    return courses
