"""
Central translation of exceptions into the uniform error envelope

    {"code": ..., "message": ..., "timestamp": "YYYY-MM-DDThh:mm:ssZ", "path": ...}

Every route shares these handlers; nothing else in the service builds error
responses.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wishlist.api.schemas.wishlist import ApiErrorResponse
from wishlist.exceptions import WishlistError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_CUSTOMER_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_PRODUCT_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_PARAMETER_TYPE": status.HTTP_400_BAD_REQUEST,
    "WISHLIST_LIMIT_EXCEEDED": status.HTTP_400_BAD_REQUEST,
    "PRODUCT_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "PRODUCT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(request: Request, code: str, message: str) -> JSONResponse:
    body = ApiErrorResponse(
        code=code,
        message=message,
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=ERROR_STATUS.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=body.model_dump(mode="json", by_alias=True),
    )


async def handle_wishlist_error(request: Request, exc: WishlistError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return error_response(request, exc.code, exc.message)


def _is_type_error(error: dict) -> bool:
    kind = str(error.get("type", ""))
    return kind.endswith("_parsing") or kind.endswith("_type")


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    type_errors = [e for e in errors if _is_type_error(e)]
    if type_errors:
        first = type_errors[0]
        name = str(first.get("loc", ("", "parameter"))[-1])
        expected = str(first.get("type", "")).rsplit("_", 1)[0] or "value"
        return error_response(
            request,
            "INVALID_PARAMETER_TYPE",
            f"Invalid parameter '{name}': expected {expected}",
        )
    details = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', '')}" for e in errors
    )
    return error_response(request, "VALIDATION_ERROR", f"Invalid input parameters: {details}")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, "INTERNAL_SERVER_ERROR", INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WishlistError, handle_wishlist_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
