"""API routes for browsing and searching the Bible corpus."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from app.models.schemas import Capitulo, ErrorResponse, Libro, Versiculo, VersiculoReferencia
from app.services.bible_service import BibleService, get_bible_service
from app.utils.exceptions import NotFoundError

router = APIRouter(prefix="/api")

LIBRO_NOT_FOUND = "Libro no encontrado"
CAPITULO_NOT_FOUND = "Capítulo no encontrado"
VERSICULO_NOT_FOUND = "Versículo no encontrado"

_BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse}}
_LOOKUP_RESPONSES = {**_BAD_REQUEST_RESPONSE, 404: {"model": ErrorResponse}}


@router.get("/libros", response_model=List[Libro], tags=["Libros"])
def list_libros(service: BibleService = Depends(get_bible_service)):
    """Obtener todos los libros de la Biblia."""
    return service.list_libros()


@router.get("/libros/{libro_id}", response_model=Libro, responses=_LOOKUP_RESPONSES, tags=["Libros"])
def get_libro(
    libro_id: int = Path(..., description="ID del libro"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener un libro por ID."""
    libro = service.get_libro(libro_id)
    if libro is None:
        raise NotFoundError(LIBRO_NOT_FOUND)
    return libro


@router.get(
    "/libros/{libro_id}/capitulos",
    response_model=List[Capitulo],
    responses=_BAD_REQUEST_RESPONSE,
    tags=["Capítulos"],
)
def list_capitulos(
    libro_id: int = Path(..., description="ID del libro"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener todos los capítulos de un libro."""
    return service.list_capitulos(libro_id)


@router.get("/capitulos/{capitulo_id}", response_model=Capitulo, responses=_LOOKUP_RESPONSES, tags=["Capítulos"])
def get_capitulo(
    capitulo_id: int = Path(..., description="ID del capítulo"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener un capítulo por ID."""
    capitulo = service.get_capitulo(capitulo_id)
    if capitulo is None:
        raise NotFoundError(CAPITULO_NOT_FOUND)
    return capitulo


@router.get(
    "/capitulos/{capitulo_id}/versiculos",
    response_model=List[Versiculo],
    responses=_BAD_REQUEST_RESPONSE,
    tags=["Versículos"],
)
def list_versiculos(
    capitulo_id: int = Path(..., description="ID del capítulo"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener todos los versículos de un capítulo."""
    return service.list_versiculos(capitulo_id)


@router.get("/versiculos/{versiculo_id}", response_model=Versiculo, responses=_LOOKUP_RESPONSES, tags=["Versículos"])
def get_versiculo(
    versiculo_id: int = Path(..., description="ID del versículo"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener un versículo por ID."""
    versiculo = service.get_versiculo(versiculo_id)
    if versiculo is None:
        raise NotFoundError(VERSICULO_NOT_FOUND)
    return versiculo


@router.get(
    "/versiculo/{libro}/{capitulo}/{versiculo}",
    response_model=VersiculoReferencia,
    responses=_LOOKUP_RESPONSES,
    tags=["Versículos"],
)
def get_versiculo_by_reference(
    libro: str = Path(..., description="Nombre del libro (ej. Génesis)"),
    capitulo: int = Path(..., description="Número del capítulo"),
    versiculo: int = Path(..., description="Número del versículo"),
    service: BibleService = Depends(get_bible_service),
):
    """Obtener un versículo por libro, capítulo y número de versículo."""
    result = service.get_versiculo_by_reference(libro, capitulo, versiculo)
    if result is None:
        raise NotFoundError(VERSICULO_NOT_FOUND)
    return result


@router.get(
    "/buscar",
    response_model=List[VersiculoReferencia],
    responses=_BAD_REQUEST_RESPONSE,
    tags=["Búsqueda"],
)
def search_versiculos(
    q: Optional[str] = Query(None, description="Texto a buscar en los versículos"),
    limit: Optional[int] = Query(None, description="Número máximo de resultados (1-200, por defecto 20)"),
    service: BibleService = Depends(get_bible_service),
):
    """Buscar versículos por texto."""
    return service.search_versiculos(q, limit)
