"""DDL for the corpus tables: libros -> capitulos -> versiculos."""

DROP_TABLES_SQL = """
DROP TABLE IF EXISTS versiculos;
DROP TABLE IF EXISTS capitulos;
DROP TABLE IF EXISTS libros;
"""

CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS libros (
    id SERIAL PRIMARY KEY,
    nombre TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS capitulos (
    id SERIAL PRIMARY KEY,
    libro_id INTEGER REFERENCES libros(id),
    numero INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS versiculos (
    id SERIAL PRIMARY KEY,
    capitulo_id INTEGER REFERENCES capitulos(id),
    numero INTEGER NOT NULL,
    texto TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_capitulos_libro_id ON capitulos (libro_id);
CREATE INDEX IF NOT EXISTS idx_versiculos_capitulo_id ON versiculos (capitulo_id);
"""


def recreate_schema(cur) -> None:
    """Drop and rebuild all three tables. Destroys any loaded corpus."""
    cur.execute(DROP_TABLES_SQL)
    cur.execute(CREATE_TABLES_SQL)
