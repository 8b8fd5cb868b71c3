"""Abstract repository for the Wishlist aggregate.

All lookups are exact-match on the customer id.  A repository holds one
document per customer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from wishlist.models.wishlist import Wishlist


class WishlistRepository(ABC):

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> Optional[Wishlist]:
        """Load the customer's wishlist, or None if no document exists."""

    @abstractmethod
    def save(self, wishlist: Wishlist) -> Wishlist:
        """Upsert by customer id, stamping ``updated_at``.

        The first save assigns the id; later saves keep it.  Returns the
        aggregate as stored.
        """

    @abstractmethod
    def delete_by_customer_id(self, customer_id: str) -> None:
        """Remove the customer's document. Missing documents are not an error."""

    @abstractmethod
    def exists_by_customer_id(self, customer_id: str) -> bool:
        """Return True if a document exists for the customer."""

    def ensure_indexes(self) -> None:
        """Prepare the backing store (indexes, directories). Called at startup."""

    def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        return True
