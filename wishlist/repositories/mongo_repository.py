"""
MongoDB-backed wishlist repository.

One document per customer in the ``wishlists`` collection:

    {
        "_id": ObjectId,
        "customerId": "cust-001",
        "products": [{"productId": "prod-001", "addedAt": ISODate}],
        "createdAt": ISODate,
        "updatedAt": ISODate,
    }

``customerId`` carries a unique index; saves are single-document upserts
keyed on it, so concurrent writers for the same customer race and the last
one wins.
"""

import logging
from typing import Optional

from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from wishlist.config import Settings
from wishlist.models.wishlist import Wishlist
from wishlist.repositories.base import WishlistRepository

logger = logging.getLogger(__name__)

CUSTOMER_ID_INDEX = "customerId_unique"


def create_client(settings: Settings) -> MongoClient:
    """Build the process-wide client. MongoClient is thread-safe and connects lazily."""
    return MongoClient(
        settings.MONGO_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


class MongoWishlistRepository(WishlistRepository):

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoWishlistRepository":
        client = create_client(settings)
        return cls(client[settings.MONGO_DATABASE][settings.MONGO_COLLECTION])

    def ensure_indexes(self) -> None:
        self.collection.create_index("customerId", unique=True, name=CUSTOMER_ID_INDEX)
        logger.info("Ensured unique index on %s.customerId", self.collection.name)

    def ping(self) -> bool:
        try:
            self.collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", e)
            return False

    def find_by_customer_id(self, customer_id: str) -> Optional[Wishlist]:
        doc = self.collection.find_one({"customerId": customer_id})
        if doc is None:
            return None
        return Wishlist.from_document(doc)

    def save(self, wishlist: Wishlist) -> Wishlist:
        wishlist.touch()
        # the replacement carries no _id, so an existing document keeps its own
        doc = self.collection.find_one_and_replace(
            {"customerId": wishlist.customer_id},
            wishlist.to_document(),
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        saved = Wishlist.from_document(doc)
        wishlist.id = saved.id
        return saved

    def delete_by_customer_id(self, customer_id: str) -> None:
        self.collection.delete_one({"customerId": customer_id})

    def exists_by_customer_id(self, customer_id: str) -> bool:
        return self.collection.count_documents({"customerId": customer_id}, limit=1) > 0
