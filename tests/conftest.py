from io import BytesIO
from pathlib import Path

import pytest
from openpyxl import Workbook

REGISTRATIONS_CSV = "学籍番号,科目番号,論理削除\nS1,C1,\nS2,C2,\nS3,C9,\nS5,C1,○\n"
STUDENTS_CSV = (
    "学籍番号,学生氏名,Ｅ－ＭＡＩＬ＿大学,Ｅ－ＭＡＩＬ\n"
    "S1,Aoki,s1@univ.example,s1@mail.example\n"
    "S2,Baba,s2@univ.example,s2@mail.example\n"
    "S3,Chiba,s3@univ.example,s3@mail.example\n"
    "S5,Endo,s5@univ.example,s5@mail.example\n"
)


def build_roster_workbook() -> bytes:
    wb = Workbook()
    first = wb.active
    first.title = "Algebra"
    second = wb.create_sheet("Geometry")
    for ws, course_id, name, students in (
        (first, "C1", "Algebra", ("S1", "S2", "S3", "S4", "S5")),
        (second, "C2", "Geometry", ("S2",)),
    ):
        ws["A1"] = "科目番号："
        ws["B1"] = course_id
        ws["A2"] = "科目名："
        ws["B2"] = name
        ws["A4"] = "学籍番号"
        for offset, student_id in enumerate(students):
            ws.cell(row=5 + offset, column=1, value=student_id)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_files(tmp_path: Path) -> tuple[Path, Path, Path]:
    registrations = tmp_path / "registrations.csv"
    registrations.write_text(REGISTRATIONS_CSV, encoding="utf-8")
    students = tmp_path / "students.csv"
    students.write_bytes(STUDENTS_CSV.encode("cp932"))
    courses = tmp_path / "courses.xlsx"
    courses.write_bytes(build_roster_workbook())
    return registrations, students, courses
