from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling
from mysql.connector.constants import ClientFlag

from ..core.constants import DEFAULT_POOL_NAME, DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_name: str = DEFAULT_POOL_NAME
    pool_size: int = DEFAULT_POOL_SIZE


class DatabaseConnection:
    """Pooled DB connection factory.

    The pool is created on first use. Each ``connect()`` hands out a pooled
    connection; closing it returns the connection to the pool.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            with self._lock:
                if self._pool is None:
                    logger.info(
                        "Creating MySQL pool %s (size=%s) for %s@%s:%s/%s",
                        self._config.pool_name,
                        self._config.pool_size,
                        self._config.user,
                        self._config.host,
                        self._config.port,
                        self._config.database,
                    )
                    self._pool = pooling.MySQLConnectionPool(
                        pool_name=self._config.pool_name,
                        pool_size=int(self._config.pool_size),
                        pool_reset_session=True,
                        host=self._config.host,
                        port=int(self._config.port),
                        user=self._config.user,
                        password=self._config.password,
                        database=self._config.database,
                        autocommit=False,
                        # rowcount must report changed rows, not matched rows (upsert/patch results rely on it).
                        client_flags=[-ClientFlag.FOUND_ROWS],
                    )
        return self._pool

    def connect(self):
        return self._get_pool().get_connection()
