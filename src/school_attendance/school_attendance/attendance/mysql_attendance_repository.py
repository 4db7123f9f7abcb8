from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.constants import ER_NO_REFERENCED_ROW_2
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, error_code, fetchall, fetchone
from .model import AttendanceListRow, AttendanceRecord, AttendanceWrite
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, student_id: int, subject_id: int, attendance_date: date, status: str) -> AttendanceWrite:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance(student_id, subject_id, attendance_date, status)
                    VALUES(%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE
                        status=VALUES(status),
                        attendance_id=LAST_INSERT_ID(attendance_id)
                    """,
                    (int(student_id), int(subject_id), attendance_date, status),
                )
            except mysql.connector.IntegrityError as exc:
                if error_code(exc) == ER_NO_REFERENCED_ROW_2:
                    raise NotFoundError("student or subject", message="Student or subject not found") from exc
                raise

            # Affected rows: 1 = inserted, 2 = existing row updated, 0 = existing row unchanged.
            created = cur.rowcount == 1
            attendance_id = int(cur.lastrowid or 0)
            if not attendance_id:
                cur.execute(
                    """
                    SELECT attendance_id FROM attendance
                    WHERE student_id=%s AND subject_id=%s AND attendance_date=%s
                    """,
                    (int(student_id), int(subject_id), attendance_date),
                )
                r = fetchone(cur)
                attendance_id = int(r["attendance_id"]) if r else 0

            record = AttendanceRecord(
                attendance_id=attendance_id,
                student_id=int(student_id),
                subject_id=int(subject_id),
                attendance_date=attendance_date,
                status=status,
            )
            return AttendanceWrite(record=record, created=created)

    def update_status(self, *, attendance_id: int, status: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET status=%s WHERE attendance_id=%s", (status, int(attendance_id)))
            if cur.rowcount > 0:
                return True

            cur.execute("SELECT attendance_id FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return fetchone(cur) is not None

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def list_records(
        self,
        *,
        subject_id: Optional[int] = None,
        attendance_date: Optional[date] = None,
    ) -> Sequence[AttendanceListRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attendance_id, a.student_id, s.name AS student_name,
                       a.subject_id, sub.name AS subject_name, a.attendance_date, a.status
                FROM attendance a
                JOIN students s ON s.student_id = a.student_id
                JOIN subjects sub ON sub.subject_id = a.subject_id
                WHERE (%s IS NULL OR a.subject_id=%s)
                  AND (%s IS NULL OR a.attendance_date=%s)
                ORDER BY a.attendance_date DESC, s.name ASC, a.attendance_id ASC
                """,
                (subject_id, subject_id, attendance_date, attendance_date),
            )
            return [
                AttendanceListRow(
                    attendance_id=int(r["attendance_id"]),
                    student_id=int(r["student_id"]),
                    student_name=r["student_name"],
                    subject_id=int(r["subject_id"]),
                    subject_name=r["subject_name"],
                    attendance_date=r["attendance_date"],
                    status=r["status"],
                )
                for r in fetchall(cur)
            ]
