"""
Core domain models for the book shelf API.
These are framework-agnostic and can be used across all services.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RequestKind(str, Enum):
    """The closed set of things a request against /books can ask for."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    UNKNOWN = "unknown"


@dataclass
class Book:
    """
    A book record as stored in the collection.

    Fields beyond id/title/author are whatever the client sent; they are kept
    verbatim in ``extra`` and flattened back out by ``to_dict``.
    """
    id: int
    title: str
    author: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, book_id: int, data: Dict[str, Any]) -> "Book":
        extra = {k: v for k, v in data.items() if k not in ("id", "title", "author")}
        return cls(
            id=book_id,
            title=data.get("title"),
            author=data.get("author"),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "author": self.author,
        }
        result.update(self.extra)
        return result

    def merged(self, edits: Dict[str, Any]) -> "Book":
        """Return a copy with ``edits`` laid over this record. ``id`` never changes."""
        data = self.to_dict()
        data.update({k: v for k, v in edits.items() if k != "id"})
        return Book.from_dict(self.id, data)


# Records loaded into a fresh collection at start-up.
SEED_BOOKS: List[Dict[str, Any]] = [
    {"id": 1, "title": "The Enormous Crocodile", "author": "Roald Dahl"},
    {"id": 2, "title": "Harry Potter", "author": "J.K. Rowling"},
]


def seed_books() -> List[Book]:
    return [Book.from_dict(data["id"], data) for data in SEED_BOOKS]


# ASCII digits only, optionally with a zero fraction ("3", " 3 ", "3.0", "-3").
_BOOK_ID_RE = re.compile(r"\s*([+-]?[0-9]+)(?:\.0*)?\s*", re.ASCII)


def parse_book_id(raw: Optional[Any]) -> Optional[int]:
    """
    Convert a path id to an int, or None if it is not an integer.

    Accepts integer strings with surrounding whitespace and integral decimals
    such as "3.0".
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _BOOK_ID_RE.fullmatch(str(raw))
    if not match:
        return None
    return int(match.group(1))
