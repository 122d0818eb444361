"""Storage helpers for the email templates used in mail links."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from roster_checker.config import SETTINGS

logger = logging.getLogger(__name__)

WRONG_COURSE_TEMPLATE_KEY = "wrong-course-email-template"
NO_COURSE_TEMPLATE_KEY = "no-course-email-template"


@dataclass(frozen=True)
class EmailTemplates:
    wrong_course: str = ""
    no_course: str = ""


def _normalize_templates(raw: Any) -> dict[str, str]:
    normalized: dict[str, str] = {}
    if not isinstance(raw, dict):
        return normalized
    for key, value in raw.items():
        if key is None:
            continue
        key_str = str(key).strip()
        if not key_str:
            continue
        normalized[key_str] = "" if value is None else str(value)
    return normalized


class TemplateStore:
    """Key-value store for templates, persisted as a JSON object."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else SETTINGS.template_path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("ignoring unreadable template file %s", self._path)
            return {}
        return _normalize_templates(data)

    def get(self, key: str) -> str:
        return self.load().get(key, "")

    def set(self, key: str, value: str) -> None:
        templates = self.load()
        templates[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(templates, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )

    def templates(self) -> EmailTemplates:
        stored = self.load()
        return EmailTemplates(
            wrong_course=stored.get(WRONG_COURSE_TEMPLATE_KEY, ""),
            no_course=stored.get(NO_COURSE_TEMPLATE_KEY, ""),
        )
