"""Database connection handle."""
import logging
import threading
from contextlib import contextmanager
from typing import Optional

import psycopg2
from fastapi import Request
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Database:
    """Process-wide handle around a psycopg2 connection pool.

    Built once at startup, shared by every request and closed on shutdown.
    Rows are returned as dicts keyed by column name. When every connection is
    borrowed, further borrowers wait up to ``timeout`` seconds for one to be
    returned instead of failing immediately.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        minconn: Optional[int] = None,
        maxconn: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        settings = settings or get_settings()
        minconn = settings.db_pool_min if minconn is None else minconn
        maxconn = settings.db_pool_max if maxconn is None else maxconn
        self._timeout = settings.db_pool_timeout if timeout is None else timeout
        # One slot per pooled connection; getconn() never runs past maxconn.
        self._slots = threading.BoundedSemaphore(maxconn)

        try:
            self._pool: Optional[pool.ThreadedConnectionPool] = pool.ThreadedConnectionPool(
                minconn,
                maxconn,
                cursor_factory=RealDictCursor,
                **settings.db_config
            )
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize connection pool: {e}")
            raise
        logger.info(f"Database connection pool initialized (min={minconn}, max={maxconn})")

    @property
    def closed(self) -> bool:
        return self._pool is None

    @contextmanager
    def connection(self):
        """Borrow a pooled connection for the duration of the block.

        Waits for a free connection, rolls back on database errors and always
        returns the connection.
        """
        if self.closed:
            raise RuntimeError("Database handle is closed")

        if not self._slots.acquire(timeout=self._timeout):
            logger.error(f"Timed out after {self._timeout}s waiting for a database connection")
            raise pool.PoolError("timed out waiting for a free connection")

        try:
            conn = None
            try:
                conn = self._pool.getconn()
                yield conn
            except psycopg2.Error as e:
                logger.error(f"Database error: {e}")
                if conn:
                    conn.rollback()
                raise
            finally:
                if conn and self._pool is not None:
                    self._pool.putconn(conn)
        finally:
            self._slots.release()

    def ping(self) -> bool:
        """Round-trip a trivial query; False when the database is unreachable."""
        if self.closed:
            return False
        try:
            with self.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1 AS ok")
                    cur.fetchone()
            return True
        except psycopg2.Error:
            return False

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed")


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle created at startup."""
    return request.app.state.db
