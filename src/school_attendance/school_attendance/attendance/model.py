from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the status of one student in one subject on one day."""

    attendance_id: int
    student_id: int
    subject_id: int
    attendance_date: date
    status: str


@dataclass(frozen=True)
class AttendanceWrite:
    """Result of an upsert: ``created`` is False when an existing record was overwritten."""

    record: AttendanceRecord
    created: bool


@dataclass(frozen=True)
class AttendanceListRow:
    """Read-model for listings (joined with student and subject names)."""

    attendance_id: int
    student_id: int
    student_name: str
    subject_id: int
    subject_name: str
    attendance_date: date
    status: str
