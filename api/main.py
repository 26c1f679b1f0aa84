"""Main FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from api.routes import router
from config.settings import Settings, settings
from models.database import Database
from models.store import ExerciseStore
from utils.exceptions import ExerciseTrackerError
from utils.logger import setup_logger

logger = setup_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


def resolve_public_dir(app_settings: Settings) -> Path:
    """Static directory, resolved against the project root when relative."""
    public_dir = Path(app_settings.public_dir)
    if not public_dir.is_absolute():
        public_dir = BASE_DIR / public_dir
    return public_dir


def create_app(store: Optional[ExerciseStore] = None, app_settings: Settings = settings) -> FastAPI:
    """Build the application.

    When ``store`` is given it is used as-is; otherwise a MongoDB connection
    is opened on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown events."""
        # Startup
        logger.info("Starting application...")
        database = None
        if app.state.store is None:
            database = Database(app_settings)
            await database.connect()
            await database.init_indexes()
            app.state.store = ExerciseStore.from_database(database)
        logger.info("Application started successfully")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        if database is not None:
            await database.close()
            app.state.store = None
        logger.info("Application shut down")

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Track users and their logged exercises",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(request: Request, exc: ExerciseTrackerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "server error"})

    app.include_router(router)

    public_dir = resolve_public_dir(app_settings)
    app.mount("/public", StaticFiles(directory=public_dir, check_dir=False), name="public")

    @app.get("/", include_in_schema=False)
    async def index():
        """Landing page."""
        return FileResponse(public_dir / "index.html")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": app_settings.app_name
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
