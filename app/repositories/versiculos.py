"""Read-only access to verses, including reference lookup and text search."""
from typing import Any, List, Optional

from app.database import Database

# Columns shared by the joined reference and search queries.
_REFERENCE_SELECT = """
    SELECT v.id, v.numero, v.texto, c.numero AS capitulo, l.nombre AS libro
    FROM versiculos v
    JOIN capitulos c ON v.capitulo_id = c.id
    JOIN libros l ON c.libro_id = l.id
"""


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class VersiculoRepository:
    """Read-only access to verses."""

    def __init__(self, db: Database):
        self._db = db

    def list_by_capitulo(self, capitulo_id: int) -> List[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT id, capitulo_id, numero, texto
                    FROM versiculos
                    WHERE capitulo_id = %s
                    ORDER BY numero
                    """,
                    (capitulo_id,),
                )
                return list(cur.fetchall())

    def get(self, versiculo_id: int) -> Optional[dict[str, Any]]:
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT id, capitulo_id, numero, texto FROM versiculos WHERE id = %s",
                    (versiculo_id,),
                )
                return cur.fetchone()

    def get_by_reference(self, libro: str, capitulo: int, versiculo: int) -> Optional[dict[str, Any]]:
        """Look up a verse by book name (case-insensitive), chapter and verse number."""
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    _REFERENCE_SELECT
                    + """
                    WHERE LOWER(l.nombre) = LOWER(%s)
                      AND c.numero = %s
                      AND v.numero = %s
                    LIMIT 1
                    """,
                    (libro, capitulo, versiculo),
                )
                return cur.fetchone()

    def search(self, term: str, limit: int) -> List[dict[str, Any]]:
        """Case-insensitive substring search over verse text."""
        with self._db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    _REFERENCE_SELECT
                    + """
                    WHERE v.texto ILIKE %s ESCAPE '\\'
                    ORDER BY v.id
                    LIMIT %s
                    """,
                    (f"%{escape_like(term)}%", limit),
                )
                return list(cur.fetchall())
