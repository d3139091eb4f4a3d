"""
Actor API endpoints, including an actor's movie links.

The routers stay thin: they translate service errors into
status codes and own the commit/rollback of each request.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from film_catalog.models.base import get_db
from film_catalog.services.actor_service import ActorService
from film_catalog.services.casting_service import CastingService
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.schemas.movie import (
    ActorCreate,
    ActorUpdate,
    ActorResponse,
    MovieSummary,
)

router = APIRouter(prefix="/actors", tags=["Actors"])


# --- Actor Endpoints ---

@router.get("", response_model=list[ActorResponse])
def list_actors(db: Session = Depends(get_db)):
    """List all actors with the movies they appear in."""
    return ActorService(db).list_actors()


@router.get("/{actor_id}", response_model=ActorResponse)
def get_actor(
    actor_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = ActorService(db)
    try:
        return service.get_actor(actor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ActorResponse, status_code=201)
def create_actor(
    request: ActorCreate,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create an actor. Names must be unique."""
    service = ActorService(db)
    try:
        actor = service.create_actor(request)
        db.commit()
    except ConflictError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))

    response.headers["Location"] = str(
        http_request.url_for("get_actor", actor_id=str(actor.id))
    )
    return service.get_actor(actor.id)


@router.put("/{actor_id}", status_code=204)
def update_actor(
    actor_id: uuid.UUID,
    request: ActorUpdate,
    db: Session = Depends(get_db),
):
    """
    Replace an actor.

    A concurrency conflict on an actor that still exists is
    not handled here and surfaces as a 500.
    """
    service = ActorService(db)
    try:
        service.update_actor(actor_id, request)
        db.commit()
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{actor_id}", status_code=204)
def delete_actor(
    actor_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = ActorService(db)
    try:
        service.delete_actor(actor_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


# --- Movie Link Endpoints ---

@router.post(
    "/{actor_id}/movies/{movie_id}",
    response_model=ActorResponse,
    status_code=201,
)
def add_movie(
    actor_id: uuid.UUID,
    movie_id: uuid.UUID,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Link a movie to an actor. Linking the same pair twice is a 409."""
    service = CastingService(db)
    try:
        actor = service.add_movie_to_actor(actor_id, movie_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))

    response.headers["Location"] = str(
        http_request.url_for("get_actor", actor_id=str(actor.id))
    )
    return actor


@router.get("/{actor_id}/movies", response_model=list[MovieSummary])
def list_actor_movies(
    actor_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = CastingService(db)
    try:
        return service.list_movies_for_actor(actor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{actor_id}/movies/{movie_id}", status_code=204)
def remove_movie(
    actor_id: uuid.UUID,
    movie_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Unlink a movie from an actor. Unlinking an unlinked pair is a no-op."""
    service = CastingService(db)
    try:
        service.remove_movie_from_actor(actor_id, movie_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
