"""Read-only access to the capitulos table."""
from typing import Any, List, Optional

from app.database import Database


class CapituloRepository:
    """Read-only access to chapters."""

    def __init__(self, db: Database):
        self._db = db

    def list_by_libro(self, libro_id: int) -> List[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT id, libro_id, numero
                    FROM capitulos
                    WHERE libro_id = %s
                    ORDER BY numero
                    """,
                    (libro_id,),
                )
                return list(cur.fetchall())

    def get(self, capitulo_id: int) -> Optional[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT id, libro_id, numero FROM capitulos WHERE id = %s",
                    (capitulo_id,),
                )
                return cur.fetchone()
