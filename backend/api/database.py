"""
In-memory storage for the book collection.

The repository is created once per application and kept on ``app.state``;
routes receive it through the ``get_books_repo`` dependency.
"""
from fastapi import Request

from domain.models import seed_books
from repositories import BooksRepository


def create_books_repo(seed: bool = True) -> BooksRepository:
    """Build a fresh repository, optionally loaded with the seed records."""
    return BooksRepository(seed_books() if seed else [])


def get_books_repo(request: Request) -> BooksRepository:
    """FastAPI dependency returning the application's repository."""
    return request.app.state.books_repo
