"""
Wishlist use cases.

Each operation validates the identifiers, loads the customer's aggregate
(or starts from an empty, unsaved one where the operation allows it),
applies the domain rule, persists and projects the result onto the
response schemas.  Domain errors propagate to the caller untouched; the
HTTP layer translates them.
"""

import logging
from typing import Optional

from wishlist.api.schemas.wishlist import (
    AddProductResponse,
    ProductExistsResponse,
    ProductResponse,
    WishlistResponse,
)
from wishlist.exceptions import (
    CustomerNotFoundError,
    InvalidCustomerIdError,
    InvalidProductIdError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    WishlistLimitExceededError,
)
from wishlist.models.wishlist import MAX_WISHLIST_PRODUCTS, Wishlist
from wishlist.repositories.base import WishlistRepository

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Product added to wishlist successfully"


def _validate_customer_id(customer_id: Optional[str]) -> None:
    if customer_id is None or not customer_id.strip():
        raise InvalidCustomerIdError()


def _validate_product_id(product_id: Optional[str]) -> None:
    if product_id is None or not product_id.strip():
        raise InvalidProductIdError()


class WishlistService:

    def __init__(self, repository: WishlistRepository):
        self.repository = repository

    def _load_or_new(self, customer_id: str) -> Wishlist:
        # an unknown customer behaves like one with an empty (unsaved) wishlist
        return self.repository.find_by_customer_id(customer_id) or Wishlist.new(customer_id)

    def get_wishlist(self, customer_id: str) -> WishlistResponse:
        _validate_customer_id(customer_id)
        wishlist = self._load_or_new(customer_id)
        logger.debug("Loaded wishlist for %s with %d products", customer_id, wishlist.product_count())
        return WishlistResponse(
            customer_id=customer_id,
            products=[ProductResponse(product_id=p.product_id, added_at=p.added_at) for p in wishlist.products],
            total_items=wishlist.product_count(),
            max_items=MAX_WISHLIST_PRODUCTS,
        )

    def add_product(self, customer_id: str, product_id: str) -> AddProductResponse:
        _validate_customer_id(customer_id)
        _validate_product_id(product_id)
        wishlist = self._load_or_new(customer_id)
        # cap before duplicate: re-adding into a full list reports the cap
        if wishlist.cannot_add_product():
            raise WishlistLimitExceededError(f"Wishlist cannot exceed {MAX_WISHLIST_PRODUCTS} products")
        if wishlist.has_product(product_id):
            raise ProductAlreadyExistsError()
        item = wishlist.add_product(product_id)
        self.repository.save(wishlist)
        logger.info("Added product %s to wishlist of %s", product_id, customer_id)
        return AddProductResponse(
            message=ADDED_MESSAGE,
            customer_id=customer_id,
            product_id=product_id,
            added_at=item.added_at,
        )

    def remove_product(self, customer_id: str, product_id: str) -> None:
        _validate_customer_id(customer_id)
        _validate_product_id(product_id)
        wishlist = self.repository.find_by_customer_id(customer_id)
        if wishlist is None:
            raise CustomerNotFoundError()
        if not wishlist.remove_product(product_id):
            raise ProductNotFoundError()
        self.repository.save(wishlist)
        logger.info("Removed product %s from wishlist of %s", product_id, customer_id)

    def check_product_exists(self, customer_id: str, product_id: str) -> ProductExistsResponse:
        """Return the stored entry; a missing product is a ProductNotFoundError, never exists=False."""
        _validate_customer_id(customer_id)
        _validate_product_id(product_id)
        product = self._load_or_new(customer_id).find_product(product_id)
        if product is None:
            raise ProductNotFoundError()
        return ProductExistsResponse(
            customer_id=customer_id,
            product_id=product_id,
            exists=True,
            added_at=product.added_at,
        )

    def clear_wishlist(self, customer_id: str) -> None:
        _validate_customer_id(customer_id)
        if not self.repository.exists_by_customer_id(customer_id):
            raise CustomerNotFoundError()
        self.repository.delete_by_customer_id(customer_id)
        logger.info("Cleared wishlist of %s", customer_id)
