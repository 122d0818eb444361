"""Central configuration for the roster checker package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_TEMPLATE_PATH = BASE_DIR / "email_templates.json"

# Column headers as exported by the registrar system.
STUDENT_ID_COLUMN = "学籍番号"
COURSE_ID_COLUMN = "科目番号"
DELETION_COLUMN = "論理削除"
STUDENT_NAME_COLUMN = "学生氏名"
SCHOOL_EMAIL_COLUMN = "Ｅ－ＭＡＩＬ＿大学"
PERSONAL_EMAIL_COLUMN = "Ｅ－ＭＡＩＬ"

# Roster sheet labels; the value sits in the cell to the right of the label.
COURSE_ID_LABEL = "科目番号："
COURSE_NAME_LABEL = "科目名："
STUDENT_ID_LABEL = "学籍番号"

ACTIVE_MARKER = ""
DELETED_MARKER = "○"


@dataclass(slots=True, frozen=True)
class Settings:
    student_id_column: str
    course_id_column: str
    deletion_column: str
    student_name_column: str
    school_email_column: str
    personal_email_column: str
    course_id_label: str
    course_name_label: str
    student_id_label: str
    active_marker: str
    deleted_marker: str
    csv_encodings: tuple[str, ...]
    template_path: Path
    mail_subject: str
    log_level: str


SETTINGS = Settings(
    student_id_column=STUDENT_ID_COLUMN,
    course_id_column=COURSE_ID_COLUMN,
    deletion_column=DELETION_COLUMN,
    student_name_column=STUDENT_NAME_COLUMN,
    school_email_column=SCHOOL_EMAIL_COLUMN,
    personal_email_column=PERSONAL_EMAIL_COLUMN,
    course_id_label=COURSE_ID_LABEL,
    course_name_label=COURSE_NAME_LABEL,
    student_id_label=STUDENT_ID_LABEL,
    active_marker=ACTIVE_MARKER,
    deleted_marker=DELETED_MARKER,
    csv_encodings=("utf-8-sig", "cp932"),
    template_path=Path(os.environ.get("ROSTER_CHECKER_TEMPLATES", DEFAULT_TEMPLATE_PATH)),
    mail_subject="履修登録の確認",
    log_level=os.environ.get("ROSTER_CHECKER_LOG_LEVEL", "WARNING").upper(),
)
