"""
Routes du catalogue de films.

GET /films, POST /films, GET /films/{id}, PUT /films/{id}.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ...services.catalog import FilmService
from ..deps import get_film_service
from ..schemas import FilmIn, FilmOut

router = APIRouter(prefix="/films", tags=["films"])

FilmServiceDep = Annotated[FilmService, Depends(get_film_service)]


@router.get("", response_model=list[FilmOut])
def list_films(service: FilmServiceDep):
    """Liste tous les films du catalogue."""
    return service.find_all()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FilmOut)
def add_film(payload: FilmIn, request: Request, response: Response, service: FilmServiceDep):
    """Ajoute un film. 409 si l'identifiant existe deja."""
    film = service.add(payload.to_entity())
    if film is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Film déjà existant")
    response.headers["Location"] = str(request.url_for("get_film", film_id=film.id))
    return film


@router.get("/{film_id}", response_model=FilmOut)
def get_film(film_id: UUID, service: FilmServiceDep):
    """Détail d'un film, 404 si inconnu."""
    film = service.find(film_id)
    if film is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Film introuvable")
    return film


@router.put("/{film_id}", response_model=FilmOut)
def update_film(film_id: UUID, payload: FilmIn, service: FilmServiceDep):
    """Remplace les données d'un film existant, 404 si inconnu."""
    film = service.update(payload.to_entity(film_id))
    if film is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Film introuvable")
    return film
