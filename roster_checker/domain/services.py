"""Domain services implementing the reconciliation rules."""
from __future__ import annotations

import logging
from typing import Mapping

from .identifiers import CourseId, StudentId
from .models import (
    Course,
    Student,
    StudentInNoCourse,
    StudentInUnknownCourse,
    StudentInWrongCourse,
    StudentWithoutDetails,
)
from .results import RegistrationDiscrepancy

logger = logging.getLogger(__name__)


def reconcile(
    registered_course_ids: Mapping[StudentId, CourseId],
    students: Mapping[StudentId, Student],
    courses: Mapping[CourseId, Course],
) -> RegistrationDiscrepancy:
    """Compare every rostered student against the directory and registrations.

    Courses are visited in mapping order and students in roster order, so the
    entries of each category come out in (course, roster position) order.
    Each (course, rostered id) pair lands in at most one category.
    """
    wrong_course: list[StudentInWrongCourse] = []
    no_course: list[StudentInNoCourse] = []
    unknown_course: list[StudentInUnknownCourse] = []
    without_details: list[StudentWithoutDetails] = []

    for course in courses.values():
        for student_id in course.expected_students:
            student = students.get(student_id)
            if student is None:
                without_details.append(StudentWithoutDetails(student_id=student_id, expected_course=course))
                continue

            registered_course_id = registered_course_ids.get(student_id)
            if registered_course_id is None:
                no_course.append(StudentInNoCourse(student=student, expected_course=course))
            elif registered_course_id != course.id:
                registered_course = courses.get(registered_course_id)
                if registered_course is None:
                    unknown_course.append(
                        StudentInUnknownCourse(
                            student=student,
                            unknown_course_id=registered_course_id,
                            expected_course=course,
                        )
                    )
                else:
                    wrong_course.append(
                        StudentInWrongCourse(
                            student=student,
                            registered_course=registered_course,
                            expected_course=course,
                        )
                    )

    report = RegistrationDiscrepancy(
        students_in_wrong_course=tuple(wrong_course),
        students_in_no_course=tuple(no_course),
        students_in_unknown_course=tuple(unknown_course),
        students_without_details=tuple(without_details),
    )
    logger.debug(
        "reconciled %d courses: wrong=%d none=%d unknown=%d without_details=%d",
        len(courses),
        len(wrong_course),
        len(no_course),
        len(unknown_course),
        len(without_details),
    )
    return report


class RegistrationReconciler:
    """Stateless reconciler injected into the application layer."""

    def reconcile(
        self,
        registered_course_ids: Mapping[StudentId, CourseId],
        students: Mapping[StudentId, Student],
        courses: Mapping[CourseId, Course],
    ) -> RegistrationDiscrepancy:
        return reconcile(registered_course_ids, students, courses)
