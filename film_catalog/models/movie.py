"""
Movie and MovieActor models.

MovieActor is the association object between movies and
actors. Its composite primary key guarantees at most one
link per (movie, actor) pair.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from film_catalog.models.base import Base, utcnow


class Movie(Base):
    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(1000), nullable=True
    )
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )

    actor_links: Mapped[list["MovieActor"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
    )
    actors: Mapped[list["Actor"]] = relationship(
        secondary="movie_actors",
        viewonly=True,
        order_by="Actor.name",
    )

    def __repr__(self) -> str:
        return f"<Movie {self.id} {self.title!r} ({self.release_year})>"


class MovieActor(Base):
    __tablename__ = "movie_actors"

    movie_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True
    )
    actor_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True
    )
    update_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    movie: Mapped["Movie"] = relationship(back_populates="actor_links")
    actor: Mapped["Actor"] = relationship(back_populates="movie_links")

    def __repr__(self) -> str:
        return f"<MovieActor movie={self.movie_id} actor={self.actor_id}>"
