"""Application services orchestrating the reconciliation workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from roster_checker.domain.identifiers import CourseId, StudentId
from roster_checker.domain.models import Course, Student
from roster_checker.domain.repositories import (
    CourseRosterRepository,
    RegistrationRepository,
    StudentDirectoryRepository,
)
from roster_checker.domain.results import RegistrationDiscrepancy
from roster_checker.domain.services import RegistrationReconciler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationContext:
    registration_repository: RegistrationRepository
    student_repository: StudentDirectoryRepository
    course_repository: CourseRosterRepository
    reconciler: RegistrationReconciler


@dataclass(slots=True, frozen=True)
class ReconciliationOutcome:
    report: RegistrationDiscrepancy
    registered_course_ids: Mapping[StudentId, CourseId]
    students: Mapping[StudentId, Student]
    courses: Mapping[CourseId, Course]


class ReconcileRegistrationsUseCase:
    def __init__(self, context: ReconciliationContext) -> None:
        self._context = context

    def execute(self) -> ReconciliationOutcome:
        registered_course_ids = self._context.registration_repository.registered_course_ids()
        students = self._context.student_repository.students()
        courses = self._context.course_repository.courses()
        logger.info(
            "loaded %d registrations, %d students, %d courses",
            len(registered_course_ids),
            len(students),
            len(courses),
        )

        report = self._context.reconciler.reconcile(registered_course_ids, students, courses)
        summary = report.summary()
        logger.info(
            "reconciliation found %d discrepancies (wrong=%d none=%d unknown=%d without_details=%d)",
            summary.total,
            summary.wrong_course,
            summary.no_course,
            summary.unknown_course,
            summary.without_details,
        )
        return ReconciliationOutcome(
            report=report,
            registered_course_ids=registered_course_ids,
            students=students,
            courses=courses,
        )
