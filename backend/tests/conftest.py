import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def books_repo():
    from api.database import create_books_repo

    return create_books_repo()


@pytest.fixture
def client(books_repo):
    from fastapi.testclient import TestClient
    from api.main import create_app

    app = create_app(books_repo=books_repo)
    return TestClient(app)
