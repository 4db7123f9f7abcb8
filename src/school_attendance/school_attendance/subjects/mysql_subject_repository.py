from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Subject, SubjectPatch
from .repository import SubjectRepository


def _to_subject(r: dict) -> Subject:
    return Subject(subject_id=int(r["subject_id"]), name=r["name"], is_basket=bool(r["is_basket"]))


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subject_id, name, is_basket FROM subjects WHERE subject_id=%s", (int(subject_id),))
            r = fetchone(cur)
            return _to_subject(r) if r else None

    def list_all(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subject_id, name, is_basket FROM subjects ORDER BY name ASC, subject_id ASC")
            return [_to_subject(r) for r in fetchall(cur)]

    def create(self, *, name: str, is_basket: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO subjects(name, is_basket) VALUES(%s,%s)", (name, bool(is_basket)))
            return int(cur.lastrowid)

    def update(self, subject_id: int, patch: SubjectPatch) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE subjects
                SET name=COALESCE(%s, name), is_basket=COALESCE(%s, is_basket)
                WHERE subject_id=%s
                """,
                (patch.name, patch.is_basket, int(subject_id)),
            )
            if cur.rowcount > 0:
                return True

            # Zero affected rows also means "values unchanged"; tell that apart from a missing row.
            cur.execute("SELECT subject_id FROM subjects WHERE subject_id=%s", (int(subject_id),))
            return fetchone(cur) is not None

    def delete(self, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE subject_id=%s", (int(subject_id),))
            return cur.rowcount > 0
