"""Create libros, capitulos and versiculos tables

Revision ID: 0001_create_corpus_tables
Revises:
Create Date: 2026-10-19
"""
from alembic import op

from app.schema import CREATE_TABLES_SQL, DROP_TABLES_SQL


revision = "0001_create_corpus_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.execute(CREATE_TABLES_SQL)


def downgrade():
    op.execute(DROP_TABLES_SQL)
