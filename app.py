"""Streamlit front-end for the registration reconciliation tool."""
from __future__ import annotations

from io import BytesIO
from typing import Mapping

import pandas as pd
import streamlit as st

from roster_checker import (
    CsvRegistrationRepository,
    CsvStudentDirectoryRepository,
    ExcelCourseRosterRepository,
    ReconcileRegistrationsUseCase,
    ReconciliationContext,
    ReconciliationOutcome,
    RegistrationReconciler,
)
from roster_checker.config import SETTINGS
from roster_checker.domain.errors import ParseError
from roster_checker.domain.models import Course
from roster_checker.domain.results import DiscrepancyEntry, RegistrationDiscrepancy
from roster_checker.infrastructure.storage.template_store import (
    NO_COURSE_TEMPLATE_KEY,
    WRONG_COURSE_TEMPLATE_KEY,
    EmailTemplates,
    TemplateStore,
)
from roster_checker.presentation.diff_report import (
    CATEGORY_TITLES,
    discrepancies_to_rows,
    render_csv,
    render_html,
)
from roster_checker.presentation.mail import compose_mailto


st.set_page_config(page_title="Registration Checker", layout="wide")
st.title("Course Registration Checker")

template_store = TemplateStore()


def courses_to_dataframe(courses: Mapping[str, Course]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "course_id": course.id,
                "name": course.name,
                "sheet": course.target_name,
                "expected_students": len(course.expected_students),
            }
            for course in courses.values()
        ],
        columns=["course_id", "name", "sheet", "expected_students"],
    )


def entries_to_dataframe(entries: tuple[DiscrepancyEntry, ...], templates: EmailTemplates) -> pd.DataFrame:
    rows = discrepancies_to_rows(entries)
    for row, entry in zip(rows, entries):
        row["mail"] = compose_mailto(entry, templates, SETTINGS.mail_subject) or ""
    return pd.DataFrame(rows)


def run_reconciliation(registrations: bytes, students: bytes, courses: bytes) -> ReconciliationOutcome:
    context = ReconciliationContext(
        registration_repository=CsvRegistrationRepository(BytesIO(registrations)),
        student_repository=CsvStudentDirectoryRepository(BytesIO(students)),
        course_repository=ExcelCourseRosterRepository(BytesIO(courses)),
        reconciler=RegistrationReconciler(),
    )
    return ReconcileRegistrationsUseCase(context).execute()


if "view" not in st.session_state:
    st.session_state["view"] = "verify"
if "result" not in st.session_state:
    st.session_state["result"] = None


with st.expander("Email templates", expanded=False):
    st.caption(
        "Variables: $student_id, $student_name, $expected_course_id, $expected_course_target, "
        "$registered_course_id, $registered_course_target (wrong course only)"
    )
    wrong_course_text = st.text_area(
        "Wrong course template",
        value=template_store.get(WRONG_COURSE_TEMPLATE_KEY),
        key="wrong_course_template",
    )
    no_course_text = st.text_area(
        "No course template",
        value=template_store.get(NO_COURSE_TEMPLATE_KEY),
        key="no_course_template",
    )
    if wrong_course_text != template_store.get(WRONG_COURSE_TEMPLATE_KEY):
        template_store.set(WRONG_COURSE_TEMPLATE_KEY, wrong_course_text)
    if no_course_text != template_store.get(NO_COURSE_TEMPLATE_KEY):
        template_store.set(NO_COURSE_TEMPLATE_KEY, no_course_text)


if st.session_state["view"] == "verify":
    col1, col2, col3 = st.columns(3)
    with col1:
        registrations_file = st.file_uploader("Registrations CSV", type=["csv"])
    with col2:
        students_file = st.file_uploader("Student directory CSV", type=["csv"])
    with col3:
        courses_file = st.file_uploader("Course rosters workbook", type=["xlsx"])

    ready = bool(registrations_file and students_file and courses_file)
    verify_btn = st.button("Verify", disabled=not ready)
    if verify_btn and ready:
        st.session_state["result"] = None
        with st.spinner("Checking registrations..."):
            try:
                outcome = run_reconciliation(
                    registrations_file.read(),
                    students_file.read(),
                    courses_file.read(),
                )
            except ParseError as exc:
                st.error(str(exc))
                outcome = None
        if outcome is not None:
            st.session_state["result"] = {
                "outcome": outcome,
                "diff_csv": render_csv(outcome.report),
                "diff_html": render_html(outcome.report),
            }
            st.session_state["view"] = "results"
            st.rerun()
else:
    if st.button("← Back", key="back_to_verify"):
        st.session_state["view"] = "verify"
        st.session_state["result"] = None
        st.rerun()

    result = st.session_state.get("result")
    if not result:
        st.info("No results available. Upload files and run verification first.")
    else:
        outcome: ReconciliationOutcome = result["outcome"]
        report: RegistrationDiscrepancy = outcome.report
        templates = template_store.templates()

        st.subheader("Summary")
        summary = report.summary()
        metrics = st.columns(4)
        metrics[0].metric("Wrong course", summary.wrong_course)
        metrics[1].metric("No course", summary.no_course)
        metrics[2].metric("Unknown course", summary.unknown_course)
        metrics[3].metric("Missing details", summary.without_details)

        categories = [
            ("wrong_course", tuple(report.students_in_wrong_course)),
            ("no_course", tuple(report.students_in_no_course)),
            ("unknown_course", tuple(report.students_in_unknown_course)),
            ("without_details", tuple(report.students_without_details)),
        ]
        tabs = st.tabs([CATEGORY_TITLES[name] for name, _ in categories] + ["Courses"])
        for tab, (name, entries) in zip(tabs, categories):
            with tab:
                if not entries:
                    st.write("None")
                    continue
                st.dataframe(
                    entries_to_dataframe(entries, templates),
                    column_config={"mail": st.column_config.LinkColumn("mail", display_text="Compose")},
                    hide_index=True,
                )
        with tabs[-1]:
            st.dataframe(courses_to_dataframe(outcome.courses), hide_index=True)

        st.download_button(
            "Download report CSV",
            data=result["diff_csv"],
            file_name="registration_discrepancies.csv",
            mime="text/csv",
        )
        st.download_button(
            "Download report HTML",
            data=result["diff_html"].encode("utf-8"),
            file_name="registration_discrepancies.html",
            mime="text/html",
        )
