"""
Actor service: create, read, replace and delete actors.

Actor names are unique. The unique index on the table is the
only arbiter: a rejected insert or update is reported as a
ConflictError, with no application-level locking.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from film_catalog.models import Actor
from film_catalog.schemas.movie import ActorCreate, ActorUpdate
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.services.records import record_exists, replace_record

logger = logging.getLogger(__name__)


class ActorService:
    """
    CRUD operations for actors.

    The session is passed in by the caller, who owns the
    transaction boundary (commit or rollback).
    """

    def __init__(self, db: Session):
        self.db = db

    def list_actors(self) -> list[Actor]:
        """Return every actor with its movies loaded."""
        actors = self.db.execute(
            select(Actor)
            .options(selectinload(Actor.movies))
            .order_by(Actor.name)
        ).scalars().all()
        return list(actors)

    def get_actor(self, actor_id: uuid.UUID) -> Actor:
        """Get an actor by id, movies included."""
        actor = self.db.execute(
            select(Actor)
            .options(selectinload(Actor.movies))
            .where(Actor.id == actor_id)
        ).scalar_one_or_none()

        if not actor:
            raise NotFoundError(f"Actor with id {actor_id} not found")
        return actor

    def create_actor(self, request: ActorCreate) -> Actor:
        """
        Create a new actor.

        Raises ConflictError if the id (when supplied) or the
        name is already taken.
        """
        if request.id is not None and record_exists(self.db, Actor, request.id):
            raise ConflictError(f"Actor with id {request.id} already exists")

        actor = Actor(name=request.name)
        if request.id is not None:
            actor.id = request.id
        self.db.add(actor)

        try:
            self.db.flush()
        except IntegrityError as e:
            logger.warning(
                "Rejected actor %r (id %s): duplicate key",
                request.name, request.id,
            )
            if request.id is not None:
                message = (
                    f"Actor with name '{request.name}' "
                    f"or id {request.id} already exists"
                )
            else:
                message = f"Actor with name '{request.name}' already exists"
            raise ConflictError(message) from e

        logger.info("Created actor %s (%s)", actor.id, actor.name)
        return actor

    def update_actor(self, actor_id: uuid.UUID, request: ActorUpdate) -> None:
        """Replace an actor's stored fields wholesale."""
        if request.id != actor_id:
            raise BadRequestError(
                f"Path id {actor_id} does not match body id {request.id}"
            )

        try:
            replace_record(
                self.db, Actor, actor_id,
                {"name": request.name},
                version=request.version,
            )
        except IntegrityError as e:
            logger.warning("Rejected rename of actor %s to %r", actor_id, request.name)
            raise ConflictError(
                f"Actor with name '{request.name}' already exists"
            ) from e

    def delete_actor(self, actor_id: uuid.UUID) -> None:
        """Delete an actor together with its movie associations."""
        actor = self.db.get(Actor, actor_id)
        if not actor:
            raise NotFoundError(f"Actor with id {actor_id} not found")

        self.db.delete(actor)
        self.db.flush()
        logger.info("Deleted actor %s", actor_id)
