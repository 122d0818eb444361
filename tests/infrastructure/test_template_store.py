import json
from pathlib import Path

from roster_checker.infrastructure.storage.template_store import (
    NO_COURSE_TEMPLATE_KEY,
    WRONG_COURSE_TEMPLATE_KEY,
    EmailTemplates,
    TemplateStore,
)


def test_missing_file_yields_empty_templates(tmp_path: Path):
    store = TemplateStore(tmp_path / "templates.json")

    assert store.get(WRONG_COURSE_TEMPLATE_KEY) == ""
    assert store.templates() == EmailTemplates()


def test_set_and_get_round_trip(tmp_path: Path):
    path = tmp_path / "nested" / "templates.json"
    store = TemplateStore(path)

    store.set(WRONG_COURSE_TEMPLATE_KEY, "$student_name: please register $expected_course_id")
    store.set(NO_COURSE_TEMPLATE_KEY, "未登録です")

    assert json.loads(path.read_text(encoding="utf-8")) == {
        NO_COURSE_TEMPLATE_KEY: "未登録です",
        WRONG_COURSE_TEMPLATE_KEY: "$student_name: please register $expected_course_id",
    }
    reloaded = TemplateStore(path).templates()
    assert reloaded.no_course == "未登録です"
    assert reloaded.wrong_course.startswith("$student_name")


def test_corrupt_file_is_treated_as_empty(tmp_path: Path):
    path = tmp_path / "templates.json"
    path.write_text("{not json", encoding="utf-8")

    store = TemplateStore(path)

    assert store.get(NO_COURSE_TEMPLATE_KEY) == ""
    store.set(NO_COURSE_TEMPLATE_KEY, "hello")
    assert store.get(NO_COURSE_TEMPLATE_KEY) == "hello"


def test_non_utf8_file_is_treated_as_empty(tmp_path: Path):
    path = tmp_path / "templates.json"
    path.write_bytes(b'{"no-course-email-template": "\xff\xfe"}')

    store = TemplateStore(path)

    assert store.get(NO_COURSE_TEMPLATE_KEY) == ""
    assert store.templates() == EmailTemplates()
