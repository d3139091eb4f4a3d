"""
Tests for the ActorService.
"""

import uuid

import pytest
from sqlalchemy.orm.exc import StaleDataError

from film_catalog.models import Actor
from film_catalog.schemas.movie import ActorCreate, ActorUpdate
from film_catalog.services.actor_service import ActorService
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)


def make_actor(service, name="Iron Man", actor_id=None):
    return service.create_actor(ActorCreate(id=actor_id, name=name))


class TestCreateActor:

    def test_create_assigns_id(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        assert actor.id is not None
        assert actor.name == "Iron Man"
        assert actor.version == 1

    def test_create_keeps_supplied_id(self, db_session):
        service = ActorService(db_session)
        wanted = uuid.uuid4()
        actor = make_actor(service, actor_id=wanted)
        db_session.commit()

        assert actor.id == wanted

    def test_duplicate_name_rejected(self, db_session):
        """Only the first actor with a given name is stored."""
        service = ActorService(db_session)
        make_actor(service)
        db_session.commit()

        with pytest.raises(ConflictError, match="Iron Man"):
            make_actor(service)
        db_session.rollback()

        assert len(service.list_actors()) == 1

    def test_duplicate_id_rejected(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        with pytest.raises(ConflictError, match=str(actor.id)):
            make_actor(service, name="Thor", actor_id=actor.id)

    def test_store_duplicate_id_message_names_id(self, db_session, monkeypatch):
        service = ActorService(db_session)
        actor_id = make_actor(service).id
        db_session.commit()
        db_session.expunge_all()

        monkeypatch.setattr(
            "film_catalog.services.actor_service.record_exists",
            lambda *args: False,
        )
        with pytest.raises(ConflictError, match=f"or id {actor_id}"):
            make_actor(service, name="Thor", actor_id=actor_id)


class TestGetActor:

    def test_round_trip(self, db_session):
        service = ActorService(db_session)
        created = make_actor(service, name="Black Widow")
        db_session.commit()
        db_session.expire_all()

        fetched = service.get_actor(created.id)
        assert fetched.id == created.id
        assert fetched.name == "Black Widow"
        assert fetched.movies == []

    def test_missing_actor_raises(self, db_session):
        service = ActorService(db_session)
        with pytest.raises(NotFoundError, match="not found"):
            service.get_actor(uuid.uuid4())

    def test_list_orders_by_name(self, db_session):
        service = ActorService(db_session)
        make_actor(service, name="Thor")
        make_actor(service, name="Hulk")
        db_session.commit()

        assert [a.name for a in service.list_actors()] == ["Hulk", "Thor"]


class TestUpdateActor:

    def test_replace_changes_name_and_bumps_version(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        service.update_actor(actor.id, ActorUpdate(id=actor.id, name="Tony Stark"))
        db_session.commit()
        db_session.expire_all()

        stored = service.get_actor(actor.id)
        assert stored.name == "Tony Stark"
        assert stored.version == 2

    def test_id_mismatch_is_bad_request_and_writes_nothing(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        with pytest.raises(BadRequestError):
            service.update_actor(
                actor.id, ActorUpdate(id=uuid.uuid4(), name="Someone Else")
            )
        db_session.commit()
        db_session.expire_all()

        stored = service.get_actor(actor.id)
        assert stored.name == "Iron Man"
        assert stored.version == 1

    def test_rename_onto_existing_name_conflicts(self, db_session):
        service = ActorService(db_session)
        make_actor(service, name="Thor")
        loki = make_actor(service, name="Loki")
        db_session.commit()

        with pytest.raises(ConflictError, match="Thor"):
            service.update_actor(loki.id, ActorUpdate(id=loki.id, name="Thor"))

    def test_update_after_delete_is_not_found(self, db_session):
        """An update that lost the race against a delete is a NotFound."""
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()
        actor_id = actor.id

        service.delete_actor(actor_id)
        db_session.commit()

        with pytest.raises(NotFoundError):
            service.update_actor(actor_id, ActorUpdate(id=actor_id, name="Ghost"))

    def test_matching_version_applies(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        service.update_actor(
            actor.id, ActorUpdate(id=actor.id, name="Tony", version=1)
        )
        db_session.commit()

        assert service.get_actor(actor.id).version == 2

    def test_stale_version_on_existing_actor_is_not_recovered(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        service.update_actor(
            actor.id, ActorUpdate(id=actor.id, name="Tony", version=1)
        )
        db_session.commit()

        with pytest.raises(StaleDataError):
            service.update_actor(
                actor.id, ActorUpdate(id=actor.id, name="Stark", version=1)
            )
        db_session.rollback()

        assert service.get_actor(actor.id).name == "Tony"


class TestDeleteActor:

    def test_delete_removes_actor(self, db_session):
        service = ActorService(db_session)
        actor = make_actor(service)
        db_session.commit()

        service.delete_actor(actor.id)
        db_session.commit()

        assert db_session.get(Actor, actor.id) is None

    def test_delete_missing_actor_raises(self, db_session):
        service = ActorService(db_session)
        with pytest.raises(NotFoundError):
            service.delete_actor(uuid.uuid4())
