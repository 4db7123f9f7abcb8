from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_date, require_fields, require_positive_int, require_status
from ..core.exceptions import NotFoundError
from .model import AttendanceListRow, AttendanceWrite
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: keep one attendance status per student, subject and day.

    Writes are last-write-wins and no history is kept. Roster membership is not
    checked here; callers mark the students returned by RosterService.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record(self, *, student_id: Any, subject_id: Any, attendance_date: Any, status: Any) -> AttendanceWrite:
        require_fields(
            {"student_id": student_id, "subject_id": subject_id, "date": attendance_date, "status": status},
            ["student_id", "subject_id", "date", "status"],
        )
        student_id = require_positive_int(student_id, "student_id")
        subject_id = require_positive_int(subject_id, "subject_id")
        attendance_date = require_date(attendance_date, "date")
        status = require_status(status)

        result = self._attendance.upsert(
            student_id=student_id,
            subject_id=subject_id,
            attendance_date=attendance_date,
            status=status,
        )
        logger.info(
            "%s attendance %s: student=%s subject=%s date=%s status=%s",
            "Recorded" if result.created else "Updated",
            result.record.attendance_id,
            student_id,
            subject_id,
            attendance_date.isoformat(),
            status,
        )
        return result

    def update_status(self, attendance_id: Any, status: Any) -> None:
        status = require_status(status)
        attendance_id = require_positive_int(attendance_id, "attendance_id")

        if not self._attendance.update_status(attendance_id=attendance_id, status=status):
            raise NotFoundError("attendance record", attendance_id, message="Attendance record not found")
        logger.info("Updated attendance %s status=%s", attendance_id, status)

    def delete(self, attendance_id: Any) -> None:
        attendance_id = require_positive_int(attendance_id, "attendance_id")
        if not self._attendance.delete(attendance_id):
            raise NotFoundError("attendance record", attendance_id, message="Attendance record not found")
        logger.info("Deleted attendance %s", attendance_id)

    def list_records(self, *, subject_id: Any = None, attendance_date: Any = None) -> Sequence[AttendanceListRow]:
        subject: Optional[int] = None
        if subject_id is not None:
            subject = require_positive_int(subject_id, "subject_id")
        on_date = require_date(attendance_date, "date") if attendance_date is not None else None
        return self._attendance.list_records(subject_id=subject, attendance_date=on_date)
