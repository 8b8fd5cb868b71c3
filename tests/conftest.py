# tests/conftest.py
import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# point settings at a throwaway file store before the app is imported
_tmp_data_dir = tempfile.mkdtemp(prefix="test_data_")
os.environ.setdefault("STORAGE_BACKEND", "file")
os.environ.setdefault("DATA_DIR", _tmp_data_dir)

from wishlist.main import app  # noqa: E402
from wishlist.api.deps import get_repository  # noqa: E402
from wishlist.repositories import FileWishlistRepository  # noqa: E402

from tests.fakes import InMemoryWishlistRepository  # noqa: E402


@pytest.fixture
def file_repository(tmp_path) -> FileWishlistRepository:
    """A file-backed repository living in this test's own temp directory."""
    return FileWishlistRepository(Path(tmp_path) / "data" / "wishlists.csv")


@pytest.fixture
def memory_repository() -> InMemoryWishlistRepository:
    return InMemoryWishlistRepository()


@pytest.fixture
def client(file_repository):
    """
    TestClient wired to an isolated file-backed repository.
    Server exceptions are returned as responses so the 500 envelope can be asserted.
    """
    app.dependency_overrides[get_repository] = lambda: file_repository
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.pop(get_repository, None)


@pytest.fixture
def add_products(client):
    """
    Add products through the API.
    Usage: add_products("cust-001", ["prod-001", "prod-002"])
    """
    def _fn(customer_id, product_ids):
        for pid in product_ids:
            r = client.post(f"/api/v1/customers/{customer_id}/wishlist/products/{pid}")
            assert r.status_code == 201, r.text
    return _fn
