"""
Database engine, session management, and base model.

Every model inherits from Base. Every request gets its own
session from get_db(), and that session is the store handle
handed to the services.
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from film_catalog.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests pooled connections before use so a
# restarted database does not surface as a failed request.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# autocommit=False: the API layer decides when to commit.
# autoflush=False: SQL is only sent on explicit flush/commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Timezone-aware current time, used for column defaults."""
    return datetime.now(timezone.utc)


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed (and any
    open transaction rolled back) even if the endpoint raises.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
