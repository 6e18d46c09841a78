"""Read-only access to the libros table."""
from typing import Any, List, Optional

from app.database import Database


class LibroRepository:
    """Read-only access to books."""

    def __init__(self, db: Database):
        self._db = db

    def list_all(self) -> List[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT id, nombre FROM libros ORDER BY id")
                return list(cur.fetchall())

    def get(self, libro_id: int) -> Optional[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT id, nombre FROM libros WHERE id = %s", (libro_id,))
                return cur.fetchone()
