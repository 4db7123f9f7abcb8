from __future__ import annotations

from typing import Sequence

import mysql.connector

from ..core.constants import ER_DUP_ENTRY, ER_NO_REFERENCED_ROW_2
from ..core.enums import EnrollmentOutcome
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, error_code, fetchall, fetchone
from ..students.model import Student
from ..students.mysql_student_repository import to_student
from .model import Enrollment, EnrollmentDetail, EnrollmentResult, StudentSubject
from .repository import EnrollmentRepository


class MySQLEnrollmentRepository(EnrollmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_if_basket(self, *, student_id: int, subject_id: int) -> EnrollmentResult:
        with db_cursor(self._conn_factory) as (conn, cur):
            # Shared lock: a concurrent UPDATE of is_basket waits until this transaction ends.
            cur.execute(
                "SELECT subject_id, is_basket FROM subjects WHERE subject_id=%s LOCK IN SHARE MODE",
                (int(subject_id),),
            )
            subject = fetchone(cur)
            if not subject:
                return EnrollmentResult(EnrollmentOutcome.SUBJECT_MISSING)
            if not subject["is_basket"]:
                return EnrollmentResult(EnrollmentOutcome.NOT_BASKET)

            try:
                cur.execute(
                    "INSERT INTO enrollments(student_id, subject_id) VALUES(%s,%s)",
                    (int(student_id), int(subject_id)),
                )
            except mysql.connector.IntegrityError as exc:
                conn.rollback()
                code = error_code(exc)
                if code == ER_DUP_ENTRY:
                    return EnrollmentResult(EnrollmentOutcome.DUPLICATE)
                if code == ER_NO_REFERENCED_ROW_2:
                    return EnrollmentResult(EnrollmentOutcome.STUDENT_MISSING)
                raise

            enrollment = Enrollment(
                enrollment_id=int(cur.lastrowid),
                student_id=int(student_id),
                subject_id=int(subject_id),
            )
            return EnrollmentResult(EnrollmentOutcome.CREATED, enrollment)

    def list_for_student(self, student_id: int) -> Sequence[StudentSubject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.enrollment_id, e.subject_id, sub.name AS subject_name, sub.is_basket
                FROM enrollments e
                JOIN subjects sub ON sub.subject_id = e.subject_id
                WHERE e.student_id=%s
                ORDER BY e.enrollment_id ASC
                """,
                (int(student_id),),
            )
            return [
                StudentSubject(
                    enrollment_id=int(r["enrollment_id"]),
                    subject_id=int(r["subject_id"]),
                    subject_name=r["subject_name"],
                    is_basket=bool(r["is_basket"]),
                )
                for r in fetchall(cur)
            ]

    def list_all(self) -> Sequence[EnrollmentDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.enrollment_id, e.student_id, s.name AS student_name,
                       e.subject_id, sub.name AS subject_name
                FROM enrollments e
                JOIN students s ON s.student_id = e.student_id
                JOIN subjects sub ON sub.subject_id = e.subject_id
                ORDER BY e.enrollment_id ASC
                """
            )
            return [
                EnrollmentDetail(
                    enrollment_id=int(r["enrollment_id"]),
                    student_id=int(r["student_id"]),
                    student_name=r["student_name"],
                    subject_id=int(r["subject_id"]),
                    subject_name=r["subject_name"],
                )
                for r in fetchall(cur)
            ]

    def delete(self, enrollment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM enrollments WHERE enrollment_id=%s", (int(enrollment_id),))
            return cur.rowcount > 0

    def list_enrolled_students(self, *, class_name: str, subject_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.student_id, s.name, s.grade, s.class_name
                FROM students s
                JOIN enrollments e ON e.student_id = s.student_id
                WHERE s.class_name=%s AND e.subject_id=%s
                ORDER BY s.name ASC, s.student_id ASC
                """,
                (class_name, int(subject_id)),
            )
            return [to_student(r) for r in fetchall(cur)]
