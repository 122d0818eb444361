from urllib.parse import unquote

from roster_checker.domain.identifiers import CourseId, Email, StudentId
from roster_checker.domain.models import (
    Course,
    Student,
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentInWrongCourse,
    StudentWithoutDetails,
)
from roster_checker.infrastructure.storage.template_store import EmailTemplates
from roster_checker.presentation.mail import (
    MailtoParams,
    compose_mailto,
    create_mailto_uri,
    fill_no_course_template,
    fill_wrong_course_template,
)

STUDENT = Student(
    id=StudentId("S1"),
    name="Aoki",
    school_email=Email("s1@univ.example"),
    personal_email=Email("s1+home@mail.example"),
)
EXPECTED = Course(id=CourseId("C1"), name="Algebra", expected_students=(StudentId("S1"),), target_name="Group A")
REGISTERED = Course(id=CourseId("C2"), name="Geometry", target_name="Group B")


def test_create_mailto_uri_encodes_components():
    uri = create_mailto_uri(
        MailtoParams(
            recipients=["a@x.example", "b@x.example"],
            cc=["c+1@x.example"],
            subject="Check (now)",
            body="line 1\nline 2 & more",
        )
    )

    assert uri == (
        "mailto:a%40x.example,b%40x.example?cc=c%2B1%40x.example&bcc="
        "&subject=Check%20(now)&body=line%201%0Aline%202%20%26%20more"
    )


def test_fill_wrong_course_template():
    entry = StudentInWrongCourse(student=STUDENT, registered_course=REGISTERED, expected_course=EXPECTED)
    template = "$student_name ($student_id): $registered_course_id/$registered_course_target -> $expected_course_id/$expected_course_target"

    assert fill_wrong_course_template(template, entry) == "Aoki (S1): C2/Group B -> C1/Group A"


def test_fill_wrong_course_template_for_unknown_course():
    entry = StudentInUnknownCourse(student=STUDENT, unknown_course_id=CourseId("X9"), expected_course=EXPECTED)

    assert fill_wrong_course_template("[$registered_course_id][$registered_course_target]", entry) == "[X9][]"


def test_fill_no_course_template_leaves_other_text_alone():
    entry = StudentInNoCourse(student=STUDENT, expected_course=EXPECTED)

    filled = fill_no_course_template("$student_id needs $expected_course_id, not $registered_course_id", entry)

    assert filled == "S1 needs C1, not $registered_course_id"


def test_compose_mailto_uses_matching_template():
    templates = EmailTemplates(wrong_course="wrong $student_id", no_course="none $student_id")
    entry = StudentInNoCourse(student=STUDENT, expected_course=EXPECTED)

    uri = compose_mailto(entry, templates, subject="Registration")

    assert uri.startswith("mailto:s1%40univ.example?cc=s1%2Bhome%40mail.example&bcc=&subject=Registration")
    assert unquote(uri.split("&body=")[1]) == "none S1"


def test_compose_mailto_without_details_has_no_link():
    entry = StudentWithoutDetails(student_id=StudentId("S9"), expected_course=EXPECTED)

    assert compose_mailto(entry, EmailTemplates(), subject="x") is None
