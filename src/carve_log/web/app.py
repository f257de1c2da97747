"""FastAPI application for the carve-log HTTP API."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from .. import __version__
from ..containers import open_stores
from .routers import nutrition, workouts


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the stores once on startup; every request shares them."""
    app.state.stores = await open_stores(app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="carve-log",
        description="Personal workout and nutrition log",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    app.include_router(workouts.router)
    app.include_router(nutrition.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
