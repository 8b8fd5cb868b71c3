# wishlist/models/wishlist.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone

from wishlist.exceptions import (
    InvalidCustomerIdError,
    ProductAlreadyExistsError,
    WishlistLimitExceededError,
)

MAX_WISHLIST_PRODUCTS = 20


def utc_now() -> datetime:
    """Current UTC instant truncated to milliseconds (the store's date precision)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def _as_utc(value: Any) -> Optional[datetime]:
    """Normalize a stored timestamp (datetime or ISO string) to an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        # pymongo hands back naive UTC datetimes unless tz_aware is set
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class WishlistProduct:
    product_id: str
    added_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WishlistProduct":
        if d is None:
            raise ValueError("Cannot construct WishlistProduct from None")
        return cls(product_id=str(d.get("productId") or ""), added_at=_as_utc(d.get("addedAt")))

    def to_dict(self) -> Dict[str, Any]:
        return {"productId": self.product_id, "addedAt": self.added_at}

    def same_product(self, product_id: str) -> bool:
        return self.product_id == product_id


@dataclass
class Wishlist:
    """
    A customer's wishlist aggregate: an ordered list of at most
    ``MAX_WISHLIST_PRODUCTS`` products with distinct product ids.

    Use ``Wishlist.new()`` for a fresh (unsaved) wishlist.  The plain
    constructor and ``from_document()`` exist so repositories can
    reconstitute stored aggregates without re-running the business rules.
    """
    customer_id: str
    id: Optional[str] = None
    products: List[WishlistProduct] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def new(cls, customer_id: str) -> "Wishlist":
        if customer_id is None or not str(customer_id).strip():
            raise InvalidCustomerIdError()
        now = utc_now()
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    # --- queries ---

    def has_product(self, product_id: str) -> bool:
        return any(p.same_product(product_id) for p in self.products)

    def find_product(self, product_id: str) -> Optional[WishlistProduct]:
        for p in self.products:
            if p.same_product(product_id):
                return p
        return None

    def product_count(self) -> int:
        return len(self.products)

    def cannot_add_product(self) -> bool:
        return self.product_count() >= MAX_WISHLIST_PRODUCTS

    # --- mutations ---

    def add_product(self, product_id: str) -> WishlistProduct:
        """
        Append a product at the end of the list. The cap is checked before
        uniqueness, so re-adding into a full list reports the cap.
        Returns the new entry.
        """
        if self.cannot_add_product():
            raise WishlistLimitExceededError(
                f"Wishlist cannot exceed {MAX_WISHLIST_PRODUCTS} products"
            )
        if self.has_product(product_id):
            raise ProductAlreadyExistsError()
        item = WishlistProduct(product_id=product_id, added_at=utc_now())
        self.products.append(item)
        self.updated_at = item.added_at
        return item

    def remove_product(self, product_id: str) -> bool:
        """Remove a product, keeping the order of the rest. Returns True if one was removed."""
        for idx, p in enumerate(self.products):
            if p.same_product(product_id):
                self.products.pop(idx)
                self.updated_at = utc_now()
                return True
        return False

    def touch(self) -> None:
        self.updated_at = utc_now()

    # --- persistence mapping ---

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Wishlist":
        if doc is None:
            raise ValueError("Cannot construct Wishlist from None")
        raw_id = doc.get("_id") or doc.get("id") or None
        created_at = _as_utc(doc.get("createdAt")) or utc_now()
        return cls(
            id=str(raw_id) if raw_id else None,
            customer_id=str(doc.get("customerId") or ""),
            products=[WishlistProduct.from_dict(p) for p in doc.get("products") or []],
            created_at=created_at,
            updated_at=_as_utc(doc.get("updatedAt")) or created_at,
        )

    def to_document(self) -> Dict[str, Any]:
        """Document body without ``_id`` (the store owns the id)."""
        return {
            "customerId": self.customer_id,
            "products": [p.to_dict() for p in self.products],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
