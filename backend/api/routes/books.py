"""
Books API routes.
"""
import json
import logging
import math
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.database import get_books_repo
from domain.results import BookOutcome
from repositories import BooksRepository
from services.book_collection import handle_books_request

router = APIRouter()
logger = logging.getLogger(__name__)

# Every method is routed here so that unsupported ones get the collection's own
# 404 instead of FastAPI's 405.
BOOK_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

INTERNAL_ERROR_BODY = {"message": "Internal Server Error"}


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_json_body(raw_body: bytes):
    """Strict JSON: NaN, Infinity and overflowing numbers are refused before anything is stored."""
    return json.loads(raw_body, parse_constant=_reject_constant, parse_float=_finite_float)


def outcome_to_response(outcome: BookOutcome) -> JSONResponse:
    """Render a service outcome. Expected errors are returned as-is, unlogged."""
    if not outcome.ok:
        logger.debug("Book request rejected: %s", outcome.error.message)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_body())


async def _dispatch(request: Request, repo: BooksRepository, book_id: Optional[str]) -> JSONResponse:
    try:
        raw_body = await request.body()

        def read_body():
            return parse_json_body(raw_body)

        outcome = handle_books_request(repo, request.method, book_id, read_body)
        return outcome_to_response(outcome)
    except Exception as e:
        # Unexpected so log it, but do not leak details to the client.
        logger.exception("Unhandled error in %s %s: %s", request.method, request.url.path, e)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


@router.api_route("", methods=BOOK_METHODS)
async def books_collection(request: Request, repo: BooksRepository = Depends(get_books_repo)):
    """List (GET) or create (POST) books."""
    return await _dispatch(request, repo, None)


@router.api_route("/{book_id}", methods=BOOK_METHODS)
async def books_item(book_id: str, request: Request, repo: BooksRepository = Depends(get_books_repo)):
    """Get, merge-edit or delete a single book."""
    return await _dispatch(request, repo, book_id)
