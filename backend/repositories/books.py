"""
Book repository backed by an in-process dictionary.
"""
import copy
import threading
from typing import Dict, Iterable, List, Optional

from domain.models import Book


class BooksRepository:
    """CRUD operations for books.

    One instance owns the whole collection for the lifetime of the process.
    Ids come from a counter that only moves forward, so a deleted id is never
    handed out again. All mutations run under a single lock; callers get
    copies, never the stored objects.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._books: Dict[int, Book] = {}
        self._lock = threading.Lock()
        self._last_id = 0
        for book in books or []:
            self._books[book.id] = copy.deepcopy(book)
            self._last_id = max(self._last_id, book.id)

    def __len__(self) -> int:
        return len(self._books)

    def list_books(self) -> List[Book]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._books.values()]

    def get_book(self, book_id: int) -> Optional[Book]:
        with self._lock:
            book = self._books.get(book_id)
            return copy.deepcopy(book) if book else None

    def create_book(self, data: dict) -> Book:
        """Store a new record built from ``data``; any ``id`` in it is ignored."""
        with self._lock:
            self._last_id += 1
            book = Book.from_dict(self._last_id, data)
            self._books[book.id] = book
            return copy.deepcopy(book)

    def update_book(self, book_id: int, edits: dict) -> Optional[Book]:
        """Merge ``edits`` over the stored record. Returns None if it is gone."""
        with self._lock:
            existing = self._books.get(book_id)
            if not existing:
                return None
            book = existing.merged(edits)
            self._books[book_id] = book
            return copy.deepcopy(book)

    def delete_book(self, book_id: int) -> Optional[Book]:
        """Remove the record and return its last state, or None if absent."""
        with self._lock:
            book = self._books.pop(book_id, None)
            return copy.deepcopy(book) if book else None
