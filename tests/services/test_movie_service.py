"""
Tests for the MovieService.
"""

import uuid

import pytest

from film_catalog.schemas.movie import MovieCreate, MovieUpdate
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.services.movie_service import MovieService


def make_movie(service, title="Avengers", year=2012, **kwargs):
    return service.create_movie(
        MovieCreate(title=title, release_year=year, **kwargs)
    )


class TestMovieCrud:

    def test_create_and_get(self, db_session):
        service = MovieService(db_session)
        movie = make_movie(service, description="Earth's mightiest heroes")
        db_session.commit()
        db_session.expire_all()

        stored = service.get_movie(movie.id)
        assert stored.title == "Avengers"
        assert stored.description == "Earth's mightiest heroes"
        assert stored.release_year == 2012
        assert stored.actors == []

    def test_list_orders_by_release_year(self, db_session):
        service = MovieService(db_session)
        make_movie(service, title="Endgame", year=2019)
        make_movie(service, title="Avengers", year=2012)
        db_session.commit()

        assert [m.release_year for m in service.list_movies()] == [2012, 2019]

    def test_duplicate_id_rejected(self, db_session):
        service = MovieService(db_session)
        movie = make_movie(service)
        db_session.commit()

        with pytest.raises(ConflictError):
            make_movie(service, title="Age of Ultron", id=movie.id)

    def test_duplicate_id_rejected_by_store(self, db_session, monkeypatch):
        """Two creates racing on one id: the primary key decides."""
        service = MovieService(db_session)
        movie_id = make_movie(service).id
        db_session.commit()
        db_session.expunge_all()

        monkeypatch.setattr(
            "film_catalog.services.movie_service.record_exists",
            lambda *args: False,
        )
        with pytest.raises(ConflictError, match=str(movie_id)):
            make_movie(service, title="Age of Ultron", id=movie_id)
        db_session.rollback()

        assert len(service.list_movies()) == 1

    def test_replace_clears_omitted_description(self, db_session):
        """Replace is wholesale: a field left out of the body is cleared."""
        service = MovieService(db_session)
        movie = make_movie(service, description="first cut")
        db_session.commit()

        service.update_movie(
            movie.id,
            MovieUpdate(id=movie.id, title="Avengers Assemble", release_year=2012),
        )
        db_session.commit()
        db_session.expire_all()

        stored = service.get_movie(movie.id)
        assert stored.title == "Avengers Assemble"
        assert stored.description is None
        assert stored.version == 2

    def test_update_id_mismatch(self, db_session):
        service = MovieService(db_session)
        movie = make_movie(service)
        db_session.commit()

        with pytest.raises(BadRequestError):
            service.update_movie(
                movie.id,
                MovieUpdate(id=uuid.uuid4(), title="X", release_year=2000),
            )

    def test_update_missing_movie(self, db_session):
        service = MovieService(db_session)
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError):
            service.update_movie(
                missing, MovieUpdate(id=missing, title="X", release_year=2000)
            )

    def test_delete_missing_movie(self, db_session):
        with pytest.raises(NotFoundError):
            MovieService(db_session).delete_movie(uuid.uuid4())
