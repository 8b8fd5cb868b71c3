import re
from functools import lru_cache

from fastapi import Depends, Path

from wishlist.config import get_settings
from wishlist.exceptions import ParameterValidationError
from wishlist.repositories import WishlistRepository, build_repository
from wishlist.services.wishlist_service import WishlistService

CUSTOMER_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,50}$")
PRODUCT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,100}$")


@lru_cache()
def _repository() -> WishlistRepository:
    # one store client per process, shared by all request threads
    return build_repository(get_settings())


def get_repository() -> WishlistRepository:
    """
    Dependency that returns the configured wishlist repository.
    Tests swap it out through ``app.dependency_overrides[get_repository]``.
    """
    return _repository()


def get_wishlist_service(repository: WishlistRepository = Depends(get_repository)) -> WishlistService:
    return WishlistService(repository)


def _check_format(name: str, value: str, pattern: "re.Pattern[str]") -> str:
    if not pattern.fullmatch(value or ""):
        raise ParameterValidationError(
            f"Invalid {name} format: must match {pattern.pattern} "
            f"(letters, digits, '-' or '_')"
        )
    return value


def valid_customer_id(
    customerId: str = Path(..., description="Customer unique identifier"),  # noqa: N803
) -> str:
    return _check_format("customerId", customerId, CUSTOMER_ID_PATTERN)


def valid_product_id(
    productId: str = Path(..., description="Product unique identifier"),  # noqa: N803
) -> str:
    return _check_format("productId", productId, PRODUCT_ID_PATTERN)
