"""
Movie service: create, read, replace and delete movies.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from film_catalog.models import Movie
from film_catalog.schemas.movie import MovieCreate, MovieUpdate
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.services.records import record_exists, replace_record

logger = logging.getLogger(__name__)


class MovieService:

    def __init__(self, db: Session):
        self.db = db

    def list_movies(self) -> list[Movie]:
        """Return every movie with its actors loaded."""
        movies = self.db.execute(
            select(Movie)
            .options(selectinload(Movie.actors))
            .order_by(Movie.release_year, Movie.title)
        ).scalars().all()
        return list(movies)

    def get_movie(self, movie_id: uuid.UUID) -> Movie:
        movie = self.db.execute(
            select(Movie)
            .options(selectinload(Movie.actors))
            .where(Movie.id == movie_id)
        ).scalar_one_or_none()

        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return movie

    def create_movie(self, request: MovieCreate) -> Movie:
        if request.id is not None and record_exists(self.db, Movie, request.id):
            raise ConflictError(f"Movie with id {request.id} already exists")

        movie = Movie(
            title=request.title,
            description=request.description,
            release_year=request.release_year,
        )
        if request.id is not None:
            movie.id = request.id
        self.db.add(movie)

        # Two requests racing on the same supplied id both pass the check
        try:
            self.db.flush()
        except IntegrityError as e:
            logger.warning("Rejected duplicate movie id %s", movie.id)
            raise ConflictError(
                f"Movie with id {request.id} already exists"
            ) from e

        logger.info("Created movie %s (%s)", movie.id, movie.title)
        return movie

    def update_movie(self, movie_id: uuid.UUID, request: MovieUpdate) -> None:
        if request.id != movie_id:
            raise BadRequestError(
                f"Path id {movie_id} does not match body id {request.id}"
            )

        replace_record(
            self.db, Movie, movie_id,
            {
                "title": request.title,
                "description": request.description,
                "release_year": request.release_year,
            },
            version=request.version,
        )

    def delete_movie(self, movie_id: uuid.UUID) -> None:
        """Delete a movie together with its actor associations."""
        movie = self.db.get(Movie, movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        self.db.delete(movie)
        self.db.flush()
        logger.info("Deleted movie %s", movie_id)
