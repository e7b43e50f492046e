"""
FastAPI application entry point for the movie catalog service.

Run: uvicorn moviesync.api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviesync import __version__
from moviesync.api.config import get_api_host, get_api_port, get_log_level
from moviesync.api.errors import register_exception_handlers
from moviesync.api.routers import movies, retrieve, system
from moviesync.utils.env import load_env
from moviesync.utils.logging_config import configure_api_logging

load_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts."""
    configure_api_logging(level=get_log_level())
    yield


app = FastAPI(
    title="Movie Catalog Sync API",
    description=(
        "Fetches high-rated Netflix movies from TMDB, stores them in the local "
        "database, and provides CRUD access to the stored records."
    ),
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(retrieve.router)
app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog Sync API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("moviesync.api.main:app", host=get_api_host(), port=get_api_port())
