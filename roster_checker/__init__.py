"""Course registration reconciliation toolkit."""
from roster_checker.application.use_cases import (
    ReconcileRegistrationsUseCase,
    ReconciliationContext,
    ReconciliationOutcome,
)
from roster_checker.domain.services import RegistrationReconciler, reconcile
from roster_checker.infrastructure.repositories.file_repositories import (
    CsvRegistrationRepository,
    CsvStudentDirectoryRepository,
    ExcelCourseRosterRepository,
)

__all__ = [
    "ReconcileRegistrationsUseCase",
    "ReconciliationContext",
    "ReconciliationOutcome",
    "RegistrationReconciler",
    "reconcile",
    "CsvRegistrationRepository",
    "CsvStudentDirectoryRepository",
    "ExcelCourseRosterRepository",
]
