"""Nominal identifier types shared across the domain."""
from __future__ import annotations

from typing import NewType

StudentId = NewType("StudentId", str)
CourseId = NewType("CourseId", str)
Email = NewType("Email", str)
