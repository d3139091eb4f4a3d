"""
Pydantic schemas for actors and movies.

Each side of the actor/movie association embeds a summary of
the other side, never the full record, so responses stay flat.
"""

import uuid

from pydantic import BaseModel, Field


# --- Summaries (embedded in the other side's responses) ---

class ActorSummary(BaseModel):
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}


class MovieSummary(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None
    release_year: int

    model_config = {"from_attributes": True}


# --- Actor Schemas ---

class ActorCreate(BaseModel):
    """Request to create an actor. The id is assigned if omitted."""
    id: uuid.UUID | None = None
    name: str = Field(min_length=1, max_length=32)


class ActorUpdate(BaseModel):
    """
    Full replacement of an actor.

    ``version`` is the concurrency token from a previous read.
    When it is sent, the replace only applies if the stored
    record still carries that version.
    """
    id: uuid.UUID
    name: str = Field(min_length=1, max_length=32)
    version: int | None = None


class ActorResponse(BaseModel):
    id: uuid.UUID
    name: str
    version: int
    movies: list[MovieSummary]

    model_config = {"from_attributes": True}


# --- Movie Schemas ---

class MovieCreate(BaseModel):
    id: uuid.UUID | None = None
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    release_year: int


class MovieUpdate(BaseModel):
    id: uuid.UUID
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    release_year: int
    version: int | None = None


class MovieResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None
    release_year: int
    version: int
    actors: list[ActorSummary]

    model_config = {"from_attributes": True}
