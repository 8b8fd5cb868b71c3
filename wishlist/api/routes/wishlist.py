from fastapi import APIRouter, Depends, Response, status

from wishlist.api.deps import get_wishlist_service, valid_customer_id, valid_product_id
from wishlist.api.schemas.wishlist import (
    AddProductResponse,
    ApiErrorResponse,
    ProductExistsResponse,
    WishlistResponse,
)
from wishlist.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/v1/customers/{customerId}/wishlist", tags=["wishlist"])

_ERRORS = {"model": ApiErrorResponse}


@router.get(
    "",
    response_model=WishlistResponse,
    summary="Get customer wishlist",
    responses={400: _ERRORS},
)
def get_wishlist(
    customer_id: str = Depends(valid_customer_id),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Retrieve all products in the customer's wishlist, in the order they were added."""
    return service.get_wishlist(customer_id)


@router.post(
    "/products/{productId}",
    status_code=status.HTTP_201_CREATED,
    response_model=AddProductResponse,
    summary="Add product to wishlist",
    responses={400: _ERRORS, 409: _ERRORS},
)
def add_product(
    customer_id: str = Depends(valid_customer_id),
    product_id: str = Depends(valid_product_id),
    service: WishlistService = Depends(get_wishlist_service),
):
    """
    Add a product to the customer's wishlist.
    - 400 WISHLIST_LIMIT_EXCEEDED when the wishlist already holds 20 products
    - 409 PRODUCT_ALREADY_EXISTS when the product is already in it
    """
    return service.add_product(customer_id, product_id)


@router.delete(
    "/products/{productId}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove product from wishlist",
    responses={400: _ERRORS, 404: _ERRORS},
)
def remove_product(
    customer_id: str = Depends(valid_customer_id),
    product_id: str = Depends(valid_product_id),
    service: WishlistService = Depends(get_wishlist_service),
):
    service.remove_product(customer_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/products/{productId}",
    response_model=ProductExistsResponse,
    summary="Check if product exists in wishlist",
    responses={400: _ERRORS, 404: _ERRORS},
)
def check_product_exists(
    customer_id: str = Depends(valid_customer_id),
    product_id: str = Depends(valid_product_id),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Return when the product was added; 404 PRODUCT_NOT_FOUND if it is not in the wishlist."""
    return service.check_product_exists(customer_id, product_id)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Clear customer wishlist",
    responses={400: _ERRORS, 404: _ERRORS},
)
def clear_wishlist(
    customer_id: str = Depends(valid_customer_id),
    service: WishlistService = Depends(get_wishlist_service),
):
    service.clear_wishlist(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
