"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.database import create_books_repo
from api.routes import books, message
from core.logging_config import setup_logging
from repositories import BooksRepository
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


async def unhandled_error_middleware(request: Request, call_next):
    """Last-resort guard: log a fault that escaped a route once and answer with a bare 500.

    The fault is not re-raised, so the server does not log it a second time.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error in %s %s: %s", request.method, request.url.path, e)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def create_app(
    settings: Optional[Settings] = None,
    books_repo: Optional[BooksRepository] = None,
) -> FastAPI:
    """Build the application with its own books repository.

    Tests pass a repository (or settings) in to start from a known state.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Book Shelf API",
        description="In-memory book collection and message echo endpoints",
        version="0.1.0",
    )

    # Registered before CORS so error responses still get CORS headers.
    app.middleware("http")(unhandled_error_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.books_repo = books_repo if books_repo is not None else create_books_repo(settings.BOOKS_SEED_ENABLED)
    logger.info("Book collection ready with %d records", len(app.state.books_repo))

    app.include_router(books.router, prefix="/books", tags=["books"])
    app.include_router(message.router, prefix="/message", tags=["message"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Book Shelf API"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
