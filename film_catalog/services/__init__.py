"""Business logic services."""

from film_catalog.services.actor_service import ActorService
from film_catalog.services.movie_service import MovieService
from film_catalog.services.invoice_service import InvoiceService
from film_catalog.services.casting_service import CastingService

__all__ = ["ActorService", "MovieService", "InvoiceService", "CastingService"]
