"""
Store operations shared by the CRUD services.

Updates are whole-record replacements keyed by id. When the
client sends the version it read, the replace also matches on
that version; the store bumps it on every successful replace.
"""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from film_catalog.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def record_exists(db: Session, model, record_id: uuid.UUID) -> bool:
    """Ask the database (not the identity map) whether the row exists."""
    found = db.execute(
        select(model.id).where(model.id == record_id)
    ).first()
    return found is not None


def replace_record(
    db: Session,
    model,
    record_id: uuid.UUID,
    values: dict,
    version: int | None = None,
) -> None:
    """
    Replace the stored columns of one record.

    If no row was replaced the record either vanished (another
    request deleted it) or its version moved on. The first case
    raises NotFoundError. The second is not recovered: the
    store's StaleDataError propagates to the caller.
    """
    stmt = update(model).where(model.id == record_id)
    if version is not None:
        stmt = stmt.where(model.version == version)

    result = db.execute(stmt.values(**values, version=model.version + 1))
    if result.rowcount == 1:
        return

    name = model.__name__
    if not record_exists(db, model, record_id):
        raise NotFoundError(f"{name} with id {record_id} not found")

    logger.error(
        "Concurrent modification of %s %s (expected version %s)",
        name, record_id, version,
    )
    raise StaleDataError(
        f"{name} {record_id} was modified concurrently; "
        f"expected version {version}"
    )
