"""Repository modules for database operations.

All repository classes are re-exported here for convenient imports.
"""
from app.repositories.libros import LibroRepository
from app.repositories.capitulos import CapituloRepository
from app.repositories.versiculos import VersiculoRepository

__all__ = [
    "LibroRepository",
    "CapituloRepository",
    "VersiculoRepository",
]
