"""Service for reading the Bible corpus from the database."""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

import psycopg2
from fastapi import Depends

from app.config import Settings, get_settings
from app.database import Database, get_database
from app.repositories.capitulos import CapituloRepository
from app.repositories.libros import LibroRepository
from app.repositories.versiculos import VersiculoRepository
from app.utils.exceptions import DatabaseError, MISSING_QUERY_MESSAGE, ValidationError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class BibleService:
    """Read-only lookups and search over libros, capitulos and versiculos."""

    def __init__(self, db: Database, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.libros = LibroRepository(db)
        self.capitulos = CapituloRepository(db)
        self.versiculos = VersiculoRepository(db)

    @staticmethod
    def _run(description: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except psycopg2.Error as exc:
            LOGGER.error("Database error %s: %s", description, exc)
            raise DatabaseError() from exc

    @staticmethod
    def _found(row: Optional[dict], description: str) -> Optional[dict]:
        if row is None:
            LOGGER.info("No row for %s", description)
            return None
        return dict(row)

    def list_libros(self) -> List[dict[str, Any]]:
        return self._run("listing libros", self.libros.list_all)

    def get_libro(self, libro_id: int) -> Optional[dict[str, Any]]:
        row = self._run(f"retrieving libro {libro_id}", lambda: self.libros.get(libro_id))
        return self._found(row, f"libro {libro_id}")

    def list_capitulos(self, libro_id: int) -> List[dict[str, Any]]:
        return self._run(
            f"listing capitulos of libro {libro_id}",
            lambda: self.capitulos.list_by_libro(libro_id),
        )

    def get_capitulo(self, capitulo_id: int) -> Optional[dict[str, Any]]:
        row = self._run(f"retrieving capitulo {capitulo_id}", lambda: self.capitulos.get(capitulo_id))
        return self._found(row, f"capitulo {capitulo_id}")

    def list_versiculos(self, capitulo_id: int) -> List[dict[str, Any]]:
        return self._run(
            f"listing versiculos of capitulo {capitulo_id}",
            lambda: self.versiculos.list_by_capitulo(capitulo_id),
        )

    def get_versiculo(self, versiculo_id: int) -> Optional[dict[str, Any]]:
        row = self._run(f"retrieving versiculo {versiculo_id}", lambda: self.versiculos.get(versiculo_id))
        return self._found(row, f"versiculo {versiculo_id}")

    def get_versiculo_by_reference(self, libro: str, capitulo: int, versiculo: int) -> Optional[dict[str, Any]]:
        """Retrieve a single verse by book name, chapter number and verse number."""
        if not libro or not libro.strip():
            raise ValidationError("El nombre del libro no puede estar vacío")

        reference = f"{libro.strip()} {capitulo}:{versiculo}"
        row = self._run(
            f"retrieving versiculo '{reference}'",
            lambda: self.versiculos.get_by_reference(libro.strip(), capitulo, versiculo),
        )
        return self._found(row, f"reference '{reference}'")

    def clamp_limit(self, limit: Optional[int]) -> int:
        """Apply the default search limit and clamp to [1, search_max_limit]."""
        if limit is None:
            limit = self.settings.search_default_limit
        return max(1, min(limit, self.settings.search_max_limit))

    def search_versiculos(self, q: Optional[str], limit: Optional[int] = None) -> List[dict[str, Any]]:
        """Case-insensitive substring search over verse text."""
        if q is None or not q.strip():
            raise ValidationError(MISSING_QUERY_MESSAGE)

        effective_limit = self.clamp_limit(limit)
        return self._run(
            f"searching versiculos for '{q}'",
            lambda: self.versiculos.search(q, effective_limit),
        )


def get_bible_service(db: Database = Depends(get_database)) -> BibleService:
    """FastAPI dependency for BibleService."""
    return BibleService(db)
