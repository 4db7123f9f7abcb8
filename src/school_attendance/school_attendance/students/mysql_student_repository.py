from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student, StudentPatch
from .repository import StudentRepository


def to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        grade=str(r["grade"]),
        class_name=r["class_name"],
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT student_id, name, grade, class_name FROM students WHERE student_id=%s",
                (int(student_id),),
            )
            r = fetchone(cur)
            return to_student(r) if r else None

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, grade, class_name
                FROM students
                ORDER BY class_name ASC, name ASC, student_id ASC
                """
            )
            return [to_student(r) for r in fetchall(cur)]

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, grade, class_name
                FROM students
                WHERE class_name=%s
                ORDER BY name ASC, student_id ASC
                """,
                (class_name,),
            )
            return [to_student(r) for r in fetchall(cur)]

    def create(self, *, name: str, grade: str, class_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(name, grade, class_name) VALUES(%s,%s,%s)",
                (name, grade, class_name),
            )
            return int(cur.lastrowid)

    def update(self, student_id: int, patch: StudentPatch) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=COALESCE(%s, name),
                    grade=COALESCE(%s, grade),
                    class_name=COALESCE(%s, class_name)
                WHERE student_id=%s
                """,
                (patch.name, patch.grade, patch.class_name, int(student_id)),
            )
            if cur.rowcount > 0:
                return True

            cur.execute("SELECT student_id FROM students WHERE student_id=%s", (int(student_id),))
            return fetchone(cur) is not None

    def delete(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0
