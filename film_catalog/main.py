"""
Film Catalog — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from film_catalog.config import get_settings
from film_catalog.logging_config import setup_logging
from film_catalog.api.health import router as health_router
from film_catalog.api.actors import router as actors_router
from film_catalog.api.movies import router as movies_router
from film_catalog.api.invoices import router as invoices_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Actors, movies and invoices over a relational store",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(actors_router)
app.include_router(movies_router)
app.include_router(invoices_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "film_catalog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
