"""
Book collection service: the logic behind /books.

Every request is first classified into a RequestKind, then handled by one
branch per kind. Expected client errors come back as failed BookOutcome
values; anything raised from here is an unexpected fault for the caller to
log and report.
"""
import logging
from typing import Any, Callable, Optional, Tuple

from domain.models import Book, RequestKind, parse_book_id
from domain.results import BookOutcome, ErrorKind
from repositories import BooksRepository

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Book id must be an integer"
MISSING_FIELDS_MESSAGE = "Title and Author are required fields"
INVALID_EDITS_MESSAGE = "Book edits must be a JSON object"
UNKNOWN_ROUTE_MESSAGE = "Not Found"

# Reads the request body; only called by the kinds that need one.
BodyReader = Callable[[], Any]


def classify_request(method: str, book_id: Optional[str]) -> RequestKind:
    """Map an HTTP method (and whether an id was given) to a RequestKind."""
    method = (method or "").upper()
    if method == "GET":
        return RequestKind.GET if book_id else RequestKind.LIST
    if method == "POST":
        return RequestKind.CREATE
    if method == "PUT":
        return RequestKind.EDIT
    if method == "DELETE":
        return RequestKind.DELETE
    return RequestKind.UNKNOWN


def get_book_by_id(repo: BooksRepository, raw_id: Optional[str]) -> Tuple[Optional[Book], Optional[BookOutcome]]:
    """
    Shared lookup for get, edit and delete.

    Returns (book, None) on success, or (None, failure) when the id is not an
    integer or no record has it.
    """
    book_id = parse_book_id(raw_id)
    if book_id is None:
        return None, BookOutcome.failure(ErrorKind.INVALID_ID, INVALID_ID_MESSAGE)
    book = repo.get_book(book_id)
    if book is None:
        return None, BookOutcome.failure(ErrorKind.NOT_FOUND, f"Book {book_id} not found")
    return book, None


def list_books(repo: BooksRepository) -> BookOutcome:
    return BookOutcome.success([b.to_dict() for b in repo.list_books()])


def get_book(repo: BooksRepository, raw_id: Optional[str]) -> BookOutcome:
    book, failure = get_book_by_id(repo, raw_id)
    if failure:
        return failure
    return BookOutcome.success(book.to_dict())


def create_book(repo: BooksRepository, data: Any) -> BookOutcome:
    """Validate ``data`` and store it as a new book with a fresh id."""
    if not isinstance(data, dict) or not data.get("title") or not data.get("author"):
        return BookOutcome.failure(ErrorKind.INVALID_INPUT, MISSING_FIELDS_MESSAGE)
    book = repo.create_book(data)
    logger.info("Created book %s", book.id)
    return BookOutcome.success(book.to_dict(), status_code=201)


def edit_book(repo: BooksRepository, raw_id: Optional[str], read_body: BodyReader) -> BookOutcome:
    """
    Merge-edit: client fields win, untouched fields survive, ``id`` is ignored.

    The id is checked before the body is read, so a bad id never depends on
    what the body contains.
    """
    existing, failure = get_book_by_id(repo, raw_id)
    if failure:
        return failure
    edits = read_body()
    if not isinstance(edits, dict):
        return BookOutcome.failure(ErrorKind.INVALID_INPUT, INVALID_EDITS_MESSAGE)
    book = repo.update_book(existing.id, edits)
    if book is None:
        # Deleted between the lookup and the update.
        return BookOutcome.failure(ErrorKind.NOT_FOUND, f"Book {existing.id} not found")
    logger.info("Updated book %s", book.id)
    return BookOutcome.success(book.to_dict())


def delete_book(repo: BooksRepository, raw_id: Optional[str]) -> BookOutcome:
    existing, failure = get_book_by_id(repo, raw_id)
    if failure:
        return failure
    book = repo.delete_book(existing.id)
    if book is None:
        return BookOutcome.failure(ErrorKind.NOT_FOUND, f"Book {existing.id} not found")
    logger.info("Deleted book %s", book.id)
    return BookOutcome.success(book.to_dict())


def handle_books_request(
    repo: BooksRepository,
    method: str,
    raw_id: Optional[str],
    read_body: BodyReader,
) -> BookOutcome:
    """Dispatch one /books request and return its outcome."""
    kind = classify_request(method, raw_id)
    if kind is RequestKind.LIST:
        return list_books(repo)
    elif kind is RequestKind.GET:
        return get_book(repo, raw_id)
    elif kind is RequestKind.CREATE:
        return create_book(repo, read_body())
    elif kind is RequestKind.EDIT:
        return edit_book(repo, raw_id, read_body)
    elif kind is RequestKind.DELETE:
        return delete_book(repo, raw_id)
    elif kind is RequestKind.UNKNOWN:
        return BookOutcome.failure(ErrorKind.UNKNOWN_ROUTE, UNKNOWN_ROUTE_MESSAGE)
    raise ValueError(f"Unhandled request kind: {kind}")
