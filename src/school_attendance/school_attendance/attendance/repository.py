from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceListRow, AttendanceWrite


class AttendanceRepository(Protocol):
    def upsert(self, *, student_id: int, subject_id: int, attendance_date: date, status: str) -> AttendanceWrite:
        """Insert or overwrite the status for (student_id, subject_id, attendance_date).

        Atomic with respect to concurrent callers; the id of an existing record
        is kept.
        """

        raise NotImplementedError

    def update_status(self, *, attendance_id: int, status: str) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def list_records(
        self,
        *,
        subject_id: Optional[int] = None,
        attendance_date: Optional[date] = None,
    ) -> Sequence[AttendanceListRow]:
        """Newest date first, then student name."""

        raise NotImplementedError
