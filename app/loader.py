"""Load the Bible corpus from a JSON document into libros/capitulos/versiculos.

The document is shaped as::

    {"books": [{"name": "Génesis",
                "chapters": [{"chapter": 1, "verses": {"1": "En el principio...", ...}}]}]}

Every run drops and rebuilds the three tables, so loading replaces the whole
corpus. Nothing is committed unless the entire document loads.
"""
import argparse
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import psycopg2

from app.config import get_settings
from app.database import Database
from app.schema import recreate_schema

LOGGER = logging.getLogger(__name__)
DEFAULT_PROGRESS_EVERY = 50
PREVIEW_LENGTH = 30


class LoaderError(Exception):
    """The source document cannot be loaded."""


@dataclass
class LoadStats:
    libros: int = 0
    capitulos: int = 0
    versiculos: int = 0
    capitulos_sin_versiculos: int = 0
    capitulos_omitidos: int = 0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Load the Bible corpus from a JSON document")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=Path(settings.bible_data_file),
        help="Path to the JSON document (default: %(default)s)",
    )
    parser.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        help="Log every Nth verse of each chapter, in addition to verse 1",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse the document and report counts without touching the database",
    )
    return parser.parse_args(argv)


def read_document(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise LoaderError(f"Data file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fh:
            document = json.load(fh)
    except json.JSONDecodeError as exc:
        raise LoaderError(f"Data file is not valid JSON: {exc}") from exc
    validate_document(document)
    return document


def validate_document(document: Any) -> None:
    """Check the books/chapters nesting; raises LoaderError naming the bad entry."""
    if not isinstance(document, dict) or not isinstance(document.get("books"), list):
        raise LoaderError("Data file must contain a 'books' list")
    for book_index, book in enumerate(document["books"]):
        if not isinstance(book, dict):
            raise LoaderError(f"books[{book_index}] must be an object")
        chapters = book.get("chapters")
        if chapters is not None and not isinstance(chapters, list):
            raise LoaderError(f"books[{book_index}].chapters must be a list")
        for chapter_index, chapter in enumerate(chapters or []):
            if not isinstance(chapter, dict):
                raise LoaderError(f"books[{book_index}].chapters[{chapter_index}] must be an object")


def has_verse_mapping(chapter: Dict[str, Any]) -> bool:
    return isinstance(chapter.get("verses"), Mapping)


def ordered_verses(verses: Mapping) -> List[Tuple[int, str]]:
    """Parse verse keys as integers and sort them numerically.

    Entries with a non-integer or non-positive key, or empty text, are skipped.
    """
    parsed: List[Tuple[int, str]] = []
    for key, text in verses.items():
        try:
            numero = int(str(key).strip())
        except ValueError:
            LOGGER.warning("Skipping verse with non-numeric key %r", key)
            continue
        if numero < 1:
            LOGGER.warning("Skipping verse with non-positive number %d", numero)
            continue
        if not isinstance(text, str) or not text.strip():
            LOGGER.warning("Skipping verse %d with empty text", numero)
            continue
        parsed.append((numero, text))
    parsed.sort(key=lambda item: item[0])
    return parsed


def chapter_number(chapter: Dict[str, Any]) -> Optional[int]:
    """The chapter's number as a positive integer, or None when unusable."""
    raw = chapter.get("chapter")
    if isinstance(raw, bool):
        return None
    try:
        numero = int(str(raw).strip())
    except ValueError:
        return None
    return numero if numero >= 1 else None


def _warn_skipped_chapter(book_name: str, raw_number: Any) -> None:
    LOGGER.warning(
        "Skipping chapter: book '%s', chapter %r is not a positive integer",
        book_name,
        raw_number,
    )


def _warn_invalid_chapter(book_name: str, chapter_number: Any) -> None:
    LOGGER.warning(
        "Problematic chapter: book '%s', chapter %s (invalid verses); loaded with no verses",
        book_name,
        chapter_number,
    )


def count_document(document: Dict[str, Any]) -> LoadStats:
    """Count what load_corpus would insert, without a database."""
    stats = LoadStats()
    for book in document["books"]:
        stats.libros += 1
        for chapter in book.get("chapters") or []:
            if chapter_number(chapter) is None:
                _warn_skipped_chapter(book.get("name"), chapter.get("chapter"))
                stats.capitulos_omitidos += 1
                continue
            stats.capitulos += 1
            if not has_verse_mapping(chapter):
                _warn_invalid_chapter(book.get("name"), chapter.get("chapter"))
                stats.capitulos_sin_versiculos += 1
                continue
            stats.versiculos += len(ordered_verses(chapter["verses"]))
    return stats


def load_corpus(conn, document: Dict[str, Any], progress_every: int = DEFAULT_PROGRESS_EVERY) -> LoadStats:
    """Rebuild the schema on ``conn`` and insert every book, chapter and verse.

    Does not commit; the caller owns the transaction.
    """
    stats = LoadStats()
    with conn.cursor() as cur:
        LOGGER.info("Recreating libros, capitulos and versiculos tables")
        recreate_schema(cur)

        for book in document["books"]:
            stats.libros += 1
            book_name = book.get("name")
            LOGGER.info("Processing book: %s", book_name)
            cur.execute("INSERT INTO libros (nombre) VALUES (%s) RETURNING id", (book_name,))
            libro_id = cur.fetchone()["id"]

            for chapter in book.get("chapters") or []:
                numero_capitulo = chapter_number(chapter)
                if numero_capitulo is None:
                    _warn_skipped_chapter(book_name, chapter.get("chapter"))
                    stats.capitulos_omitidos += 1
                    continue
                stats.capitulos += 1
                LOGGER.info("  Chapter: %s", numero_capitulo)
                cur.execute(
                    "INSERT INTO capitulos (libro_id, numero) VALUES (%s, %s) RETURNING id",
                    (libro_id, numero_capitulo),
                )
                capitulo_id = cur.fetchone()["id"]

                if not has_verse_mapping(chapter):
                    _warn_invalid_chapter(book_name, numero_capitulo)
                    stats.capitulos_sin_versiculos += 1
                    continue

                for numero, texto in ordered_verses(chapter["verses"]):
                    stats.versiculos += 1
                    if numero == 1 or (progress_every > 0 and numero % progress_every == 0):
                        LOGGER.info("    Verse %d: %s...", numero, texto[:PREVIEW_LENGTH])
                    cur.execute(
                        "INSERT INTO versiculos (capitulo_id, numero, texto) VALUES (%s, %s, %s)",
                        (capitulo_id, numero, texto),
                    )
    return stats


def log_totals(stats: LoadStats) -> None:
    LOGGER.info("Total books: %d", stats.libros)
    LOGGER.info("Total chapters: %d", stats.capitulos)
    LOGGER.info("Total verses: %d", stats.versiculos)
    if stats.capitulos_sin_versiculos:
        LOGGER.warning("Chapters without verses: %d", stats.capitulos_sin_versiculos)
    if stats.capitulos_omitidos:
        LOGGER.warning("Chapters skipped: %d", stats.capitulos_omitidos)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)
    LOGGER.info("Loading document from %s", args.data_file)

    try:
        document = read_document(args.data_file)
    except LoaderError as exc:
        LOGGER.error("%s", exc)
        return 1

    if args.dry_run:
        LOGGER.info("Dry run enabled; skipping database writes")
        log_totals(count_document(document))
        return 0

    db = None
    try:
        db = Database(get_settings(), minconn=1, maxconn=1)
        with db.connection() as conn:
            stats = load_corpus(conn, document, progress_every=args.progress_every)
            conn.commit()
    except psycopg2.Error as exc:
        LOGGER.error("Load aborted, nothing was committed: %s", exc)
        return 1
    finally:
        if db is not None:
            db.close()

    log_totals(stats)
    LOGGER.info("Data loaded successfully")
    return 0
