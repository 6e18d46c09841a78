"""Pydantic models for response schemas."""
from datetime import datetime
from pydantic import BaseModel, Field


class Libro(BaseModel):
    """A book of the Bible."""
    id: int = Field(..., description="Libro ID")
    nombre: str = Field(..., description="Book name, e.g. 'Génesis'")


class Capitulo(BaseModel):
    """A chapter within a book."""
    id: int = Field(..., description="Capítulo ID")
    libro_id: int = Field(..., description="Owning libro ID")
    numero: int = Field(..., ge=1, description="Chapter number within the book")


class Versiculo(BaseModel):
    """A verse within a chapter."""
    id: int = Field(..., description="Versículo ID")
    capitulo_id: int = Field(..., description="Owning capitulo ID")
    numero: int = Field(..., ge=1, description="Verse number within the chapter")
    texto: str = Field(..., description="Verse text")


class VersiculoReferencia(BaseModel):
    """A verse joined with its chapter number and book name."""
    id: int = Field(..., description="Versículo ID")
    numero: int = Field(..., ge=1, description="Verse number")
    texto: str = Field(..., description="Verse text")
    capitulo: int = Field(..., ge=1, description="Chapter number")
    libro: str = Field(..., description="Book name")


class ErrorResponse(BaseModel):
    """Body returned for every error response."""
    error: str = Field(..., min_length=1, description="Client-safe error message")


class HealthCheck(BaseModel):
    """Health check response model."""
    status: str
    database: str
    timestamp: datetime
