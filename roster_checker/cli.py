"""Command-line entrypoint for registration reconciliation."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from roster_checker.application.use_cases import ReconcileRegistrationsUseCase, ReconciliationContext
from roster_checker.config import SETTINGS
from roster_checker.domain.errors import ParseError
from roster_checker.domain.results import RegistrationDiscrepancy
from roster_checker.domain.services import RegistrationReconciler
from roster_checker.infrastructure.repositories.file_repositories import (
    CsvRegistrationRepository,
    CsvStudentDirectoryRepository,
    ExcelCourseRosterRepository,
)
from roster_checker.presentation.diff_report import discrepancies_to_rows

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_PARSE_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check course registrations against expected rosters")
    parser.add_argument("registrations", type=Path, help="Path to registration CSV")
    parser.add_argument("students", type=Path, help="Path to student directory CSV")
    parser.add_argument("courses", type=Path, help="Path to course roster workbook (.xlsx)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--fail-on-issues",
        action="store_true",
        help="Exit with status 1 when discrepancies are found",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=SETTINGS.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def print_summary(report: RegistrationDiscrepancy) -> None:
    summary = report.summary()
    print("Reconciliation Summary")
    print("======================")
    print(f"Wrong course: {summary.wrong_course}")
    print(f"No course: {summary.no_course}")
    print(f"Unknown course: {summary.unknown_course}")
    print(f"Missing details: {summary.without_details}")

    if report.has_issues():
        print("\nDiscrepancies detected:")
        for row in discrepancies_to_rows(report.iter_all_discrepancies()):
            line = f"- {row['issue_type']} {row['student_id']}"
            if row["student_name"]:
                line += f" ({row['student_name']})"
            line += f" expected in {row['expected_course_id']}"
            if row["registered_course_id"]:
                line += f", registered in {row['registered_course_id']}"
            print(line)
    else:
        print("\nNo discrepancies detected.")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        context = ReconciliationContext(
            registration_repository=CsvRegistrationRepository(args.registrations),
            student_repository=CsvStudentDirectoryRepository(args.students),
            course_repository=ExcelCourseRosterRepository(args.courses),
            reconciler=RegistrationReconciler(),
        )
        outcome = ReconcileRegistrationsUseCase(context).execute()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except ParseError as exc:
        logger.debug("parse failed: %s", exc.kind)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    report = outcome.report
    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_summary(report)

    if args.fail_on_issues and report.has_issues():
        return EXIT_ISSUES
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
