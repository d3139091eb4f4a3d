"""
Movie API endpoints.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from film_catalog.models.base import get_db
from film_catalog.services.movie_service import MovieService
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.schemas.movie import MovieCreate, MovieUpdate, MovieResponse

router = APIRouter(prefix="/movies", tags=["Movies"])


@router.get("", response_model=list[MovieResponse])
def list_movies(db: Session = Depends(get_db)):
    """List all movies with their actors."""
    return MovieService(db).list_movies()


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    try:
        return service.get_movie(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=MovieResponse, status_code=201)
def create_movie(
    request: MovieCreate,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    try:
        movie = service.create_movie(request)
        db.commit()
    except ConflictError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))

    response.headers["Location"] = str(
        http_request.url_for("get_movie", movie_id=str(movie.id))
    )
    return service.get_movie(movie.id)


@router.put("/{movie_id}", status_code=204)
def update_movie(
    movie_id: uuid.UUID,
    request: MovieUpdate,
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    try:
        service.update_movie(movie_id, request)
        db.commit()
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{movie_id}", status_code=204)
def delete_movie(
    movie_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Delete a movie. Its actor links are removed with it."""
    service = MovieService(db)
    try:
        service.delete_movie(movie_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
