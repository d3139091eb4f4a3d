"""
Service-layer errors.

They subclass ValueError so callers that only care about
"the request was rejected" can keep catching ValueError.
The routers map each subclass to its own status code.
"""


class CatalogError(ValueError):
    """Base class for every rejection raised by a service."""


class NotFoundError(CatalogError):
    """The referenced identity does not exist."""


class BadRequestError(CatalogError):
    """The client sent contradicting identities (path vs body)."""


class ConflictError(CatalogError):
    """A uniqueness rule or an existing association was violated."""
