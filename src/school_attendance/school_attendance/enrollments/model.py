from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EnrollmentOutcome


@dataclass(frozen=True)
class Enrollment:
    """Domain entity: a student opted into a basket subject."""

    enrollment_id: int
    student_id: int
    subject_id: int


@dataclass(frozen=True)
class StudentSubject:
    """Read-model: one enrollment of a student with its subject info."""

    enrollment_id: int
    subject_id: int
    subject_name: str
    is_basket: bool


@dataclass(frozen=True)
class EnrollmentDetail:
    """Read-model: enrollment joined with student and subject names."""

    enrollment_id: int
    student_id: int
    student_name: str
    subject_id: int
    subject_name: str


@dataclass(frozen=True)
class EnrollmentResult:
    outcome: EnrollmentOutcome
    enrollment: Optional[Enrollment] = None
