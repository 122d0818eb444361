from io import BytesIO

import pytest
from openpyxl import Workbook

from roster_checker.domain.errors import MissingCellError, UnreadableWorkbookError
from roster_checker.infrastructure.parsing.courses import parse_courses, read_roster_workbook


def roster_sheet(ws, course_id="C1", course_name="Algebra", students=("S1", "S2")):
    ws["A1"] = "科目番号："
    ws["B1"] = course_id
    ws["A2"] = "科目名："
    ws["B2"] = course_name
    ws["B4"] = "学籍番号"
    for offset, student_id in enumerate(students):
        ws.cell(row=5 + offset, column=2, value=student_id)


def workbook_bytes(wb: Workbook) -> bytes:
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def test_parses_one_course_per_sheet():
    wb = Workbook()
    first = wb.active
    first.title = "Group A"
    roster_sheet(first, "C1", "Algebra", ("S1", "S2"))
    roster_sheet(wb.create_sheet("Group B"), "C2", "Geometry", ("S3",))

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert list(courses) == ["C1", "C2"]
    assert courses["C1"].name == "Algebra"
    assert courses["C1"].expected_students == ("S1", "S2")
    assert courses["C1"].target_name == "Group A"
    assert courses["C2"].expected_students == ("S3",)


def test_student_column_skips_blanks_and_trims():
    wb = Workbook()
    ws = wb.active
    roster_sheet(ws, students=())
    ws["B5"] = " S1 "
    ws["B7"] = "S2"
    ws["B8"] = "   "
    ws["B9"] = "S1"

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert courses["C1"].expected_students == ("S1", "S2", "S1")


def test_numeric_ids_are_read_as_text():
    wb = Workbook()
    ws = wb.active
    roster_sheet(ws, course_id=None, students=())
    ws["B1"] = 1234
    ws["B5"] = 202401

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert list(courses) == ["1234"]
    assert courses["1234"].expected_students == ("202401",)


@pytest.mark.parametrize(
    "cell, blank",
    [
        ("course-id-label", "A1"),
        ("course-id", "B1"),
        ("course-name-label", "A2"),
        ("course-name", "B2"),
        ("student-id-label", "B4"),
    ],
)
def test_missing_cells_are_reported(cell, blank):
    wb = Workbook()
    ws = wb.active
    ws.title = "Roster"
    roster_sheet(ws)
    ws[blank] = None

    with pytest.raises(MissingCellError) as excinfo:
        parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert excinfo.value.cell == cell
    assert excinfo.value.sheet_name == "Roster"


def test_one_bad_sheet_aborts_whole_parse():
    wb = Workbook()
    roster_sheet(wb.active)
    wb.create_sheet("Notes")["A1"] = "memo"

    with pytest.raises(MissingCellError) as excinfo:
        parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert excinfo.value.sheet_name == "Notes"
    assert excinfo.value.cell == "course-id-label"


def test_repeated_course_id_keeps_later_sheet():
    wb = Workbook()
    first = wb.active
    first.title = "First"
    roster_sheet(first, "C1", "Algebra", ("S1",))
    roster_sheet(wb.create_sheet("Second"), "C1", "Algebra II", ("S2",))

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert len(courses) == 1
    assert courses["C1"].target_name == "Second"
    assert courses["C1"].expected_students == ("S2",)


def test_unreadable_workbook():
    with pytest.raises(UnreadableWorkbookError):
        read_roster_workbook(b"not a workbook")


def test_na_like_text_is_kept_as_values():
    wb = Workbook()
    ws = wb.active
    roster_sheet(ws, course_id="C1", course_name="None", students=("NA", "null", "S1"))

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert courses["C1"].name == "None"
    assert courses["C1"].expected_students == ("NA", "null", "S1")


def test_whitespace_value_cell_counts_as_present():
    wb = Workbook()
    ws = wb.active
    roster_sheet(ws)
    ws["B2"] = "   "

    courses = parse_courses(read_roster_workbook(workbook_bytes(wb)))

    assert courses["C1"].name == ""
