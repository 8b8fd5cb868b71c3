from wishlist.config import Settings
from wishlist.repositories.base import WishlistRepository
from wishlist.repositories.file_repository import FileWishlistRepository
from wishlist.repositories.mongo_repository import MongoWishlistRepository


def build_repository(settings: Settings) -> WishlistRepository:
    """Pick the storage backend named by ``STORAGE_BACKEND``."""
    backend = (settings.STORAGE_BACKEND or "").strip().lower()
    if backend == "mongo":
        return MongoWishlistRepository.from_settings(settings)
    if backend == "file":
        return FileWishlistRepository.from_settings(settings)
    raise ValueError(f"Unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r} (expected 'mongo' or 'file')")


__all__ = [
    "WishlistRepository",
    "FileWishlistRepository",
    "MongoWishlistRepository",
    "build_repository",
]
