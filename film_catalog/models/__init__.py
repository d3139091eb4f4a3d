"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from film_catalog.models.base import Base
from film_catalog.models.enums import InvoiceStatus
from film_catalog.models.actor import Actor
from film_catalog.models.movie import Movie, MovieActor
from film_catalog.models.invoice import Invoice, InvoiceItem

__all__ = [
    "Base",
    "InvoiceStatus",
    "Actor",
    "Movie",
    "MovieActor",
    "Invoice",
    "InvoiceItem",
]
