"""
The casting service manages which actors appear in which movies.

Links are MovieActor rows. Adding a link that already exists
is an error the caller can detect (ConflictError). Removing a
link that does not exist is a silent success, as long as both
the actor and the movie exist.

Nothing is cached between calls: every operation reads the
current links from the database before acting.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from film_catalog.models import Actor, Movie, MovieActor
from film_catalog.services.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class CastingService:

    def __init__(self, db: Session):
        self.db = db

    def _actor_or_raise(self, actor_id: uuid.UUID) -> Actor:
        actor = self.db.execute(
            select(Actor)
            .options(selectinload(Actor.movies), selectinload(Actor.movie_links))
            .where(Actor.id == actor_id)
        ).scalar_one_or_none()
        if not actor:
            raise NotFoundError(f"Actor with id {actor_id} not found")
        return actor

    def _movie_or_raise(self, movie_id: uuid.UUID) -> Movie:
        movie = self.db.get(Movie, movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return movie

    def _find_link(
        self, actor_id: uuid.UUID, movie_id: uuid.UUID
    ) -> MovieActor | None:
        return self.db.execute(
            select(MovieActor).where(
                MovieActor.actor_id == actor_id,
                MovieActor.movie_id == movie_id,
            )
        ).scalar_one_or_none()

    def add_movie_to_actor(
        self, actor_id: uuid.UUID, movie_id: uuid.UUID
    ) -> Actor:
        """
        Link a movie to an actor and return the actor.

        Raises NotFoundError naming the missing side, or
        ConflictError if the pair is already linked. A duplicate
        rejected by the join table's primary key (two requests
        racing on the same pair) is a ConflictError too.
        """
        actor = self._actor_or_raise(actor_id)
        movie = self._movie_or_raise(movie_id)

        if self._find_link(actor.id, movie.id) is not None:
            raise ConflictError(
                f"Movie with id {movie_id} already exists for Actor {actor_id}"
            )

        actor.movie_links.append(MovieActor(movie=movie))
        try:
            self.db.flush()
        except IntegrityError as e:
            logger.warning(
                "Lost race linking movie %s to actor %s", movie_id, actor_id
            )
            raise ConflictError(
                f"Movie with id {movie_id} already exists for Actor {actor_id}"
            ) from e

        # The movies shortcut is read-only; reload it from the new links
        self.db.expire(actor, ["movies"])
        logger.info("Linked movie %s to actor %s", movie_id, actor_id)
        return actor

    def list_movies_for_actor(self, actor_id: uuid.UUID) -> list[Movie]:
        """Return the movies an actor appears in."""
        actor = self._actor_or_raise(actor_id)
        return list(actor.movies)

    def remove_movie_from_actor(
        self, actor_id: uuid.UUID, movie_id: uuid.UUID
    ) -> None:
        """
        Unlink a movie from an actor.

        Both records must exist. A missing link is not an error.
        """
        actor = self._actor_or_raise(actor_id)
        movie = self._movie_or_raise(movie_id)

        link = next(
            (link for link in actor.movie_links if link.movie_id == movie.id),
            None,
        )
        if link is None:
            logger.debug(
                "No link between movie %s and actor %s; nothing to remove",
                movie_id, actor_id,
            )
            return

        actor.movie_links.remove(link)
        self.db.flush()
        self.db.expire(actor, ["movies"])
        logger.info("Unlinked movie %s from actor %s", movie_id, actor_id)
