"""
Actor model.

An actor appears in many movies and a movie has many actors.
The link is the MovieActor association object, which carries
its own timestamp; ``movies`` is a read-only shortcut across it.
"""

import uuid

from sqlalchemy import String, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from film_catalog.models.base import Base


class Actor(Base):
    __tablename__ = "actors"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False
    )
    # Concurrency token, bumped on every replace
    version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )

    # Join rows are removed together with the actor
    movie_links: Mapped[list["MovieActor"]] = relationship(
        back_populates="actor",
        cascade="all, delete-orphan",
    )
    movies: Mapped[list["Movie"]] = relationship(
        secondary="movie_actors",
        viewonly=True,
        order_by="Movie.title",
    )

    def __repr__(self) -> str:
        return f"<Actor {self.id} {self.name!r}>"
