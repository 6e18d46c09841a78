"""Custom exceptions for the Biblia API."""
from enum import Enum

from fastapi import HTTPException


class ErrorKind(str, Enum):
    """Closed set of error categories surfaced to API clients."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
BAD_REQUEST_MESSAGE = "Solicitud inválida"
MISSING_QUERY_MESSAGE = "Parámetro de búsqueda requerido (q)"


class ApiError(HTTPException):
    """Base class for errors carrying an ErrorKind."""
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, detail: str):
        super().__init__(status_code=self.kind.status_code, detail=detail)


class NotFoundError(ApiError):
    """Requested row does not exist."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(detail=detail)


class ValidationError(ApiError):
    """Input validation errors."""
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, detail: str = BAD_REQUEST_MESSAGE):
        super().__init__(detail=detail)


class DatabaseError(ApiError):
    """Database-related errors."""
    kind = ErrorKind.INTERNAL

    def __init__(self, detail: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(detail=detail)
