from __future__ import annotations

import logging
import re
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import mysql.connector

logger = logging.getLogger(__name__)

# Quoted literals are kept whole so a ';' inside them never splits a statement.
_SQL_TOKEN = re.compile(r"""'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*"|;|[^'";]+|['"]""", re.S)
_DB_SELECTION = re.compile(r"(?im)^\s*(?:CREATE\s+DATABASE|USE)\b[^;]*;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_config(cls, db_config: dict) -> "DBTarget":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_system")),
        )

    def connect(self, *, with_database: bool = True):
        """Short-lived connection outside the request pool."""

        kwargs = {"host": self.host, "port": self.port, "user": self.user, "password": self.password, "use_pure": True}
        if with_database:
            kwargs["database"] = self.database
        return mysql.connector.connect(**kwargs)


@dataclass(frozen=True)
class SqlScript:
    """A schema or seed file reduced to executable statements.

    ``CREATE DATABASE`` and ``USE`` lines are dropped so the configured
    database name always wins over the one written in the file.
    """

    name: str
    statements: Tuple[str, ...]

    @classmethod
    def parse(cls, sql: str, name: str = "<sql>") -> "SqlScript":
        sql = _LINE_COMMENT.sub("", _DB_SELECTION.sub("", sql))

        statements: List[str] = []
        buf: List[str] = []
        for token in _SQL_TOKEN.findall(sql):
            if token != ";":
                buf.append(token)
                continue
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                statements.append(stmt)

        tail = "".join(buf).strip()
        if tail:
            statements.append(tail)
        return cls(name=name, statements=tuple(statements))

    @classmethod
    def load(cls, path: str | Path) -> "SqlScript":
        path = Path(path)
        return cls.parse(path.read_text(encoding="utf-8"), name=path.name)

    def run(self, target: DBTarget) -> int:
        with closing(target.connect()) as conn:
            cur = conn.cursor()
            for stmt in self.statements:
                cur.execute(stmt)
            conn.commit()
        logger.info("Applied %s statements from %s to %s", len(self.statements), self.name, target.database)
        return len(self.statements)


def ensure_database_exists(db_config: dict) -> None:
    target = DBTarget.from_config(db_config)
    with closing(target.connect(with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    ensure_database_exists(db_config)
    return SqlScript.load(schema_path).run(DBTarget.from_config(db_config))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> int:
    return SqlScript.load(seed_path).run(DBTarget.from_config(db_config))


def list_tables(db_config: dict) -> List[str]:
    with closing(DBTarget.from_config(db_config).connect()) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())


def bootstrap_database(
    db_config: dict,
    *,
    schema_path: Optional[str | Path] = None,
    seed_path: Optional[str | Path] = None,
) -> List[str]:
    """Apply schema and/or seed files, then return the table names present."""

    if schema_path is not None:
        apply_schema(db_config, schema_path=schema_path)
    if seed_path is not None:
        apply_seed_sql(db_config, seed_path=seed_path)
    return list_tables(db_config)
