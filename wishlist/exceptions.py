"""Typed failures raised by the aggregate, the service and the request
validators.

Every error carries a stable ``code`` that the HTTP layer maps to a status
(see ``wishlist.api.errors``).  Nothing in here knows about HTTP.
"""

from __future__ import annotations

from typing import Optional


class WishlistError(Exception):
    """Base class for all expected failures of the wishlist service."""

    code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred. Please try again later."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- input shape -------------------------------------------------------------

class ParameterValidationError(WishlistError):
    code = "VALIDATION_ERROR"
    default_message = "Invalid input parameters"


class InvalidParameterTypeError(WishlistError):
    code = "INVALID_PARAMETER_TYPE"
    default_message = "Invalid parameter type"


class InvalidCustomerIdError(WishlistError):
    code = "INVALID_CUSTOMER_ID"
    default_message = "Customer ID cannot be null or empty"


class InvalidProductIdError(WishlistError):
    code = "INVALID_PRODUCT_ID"
    default_message = "Product ID cannot be null or empty"


# --- domain rules --------------------------------------------------------------

class WishlistLimitExceededError(WishlistError):
    code = "WISHLIST_LIMIT_EXCEEDED"
    default_message = "Wishlist cannot exceed 20 products"


class ProductAlreadyExistsError(WishlistError):
    code = "PRODUCT_ALREADY_EXISTS"
    default_message = "Product already exists in wishlist"


class ProductNotFoundError(WishlistError):
    code = "PRODUCT_NOT_FOUND"
    default_message = "Product not found in wishlist"


class CustomerNotFoundError(WishlistError):
    code = "CUSTOMER_NOT_FOUND"
    default_message = "Customer not found"
