# --- Pydantic schemas for wishlist endpoints ---
from datetime import datetime, timezone
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

WIRE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDThh:mm:ssZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(WIRE_TIMESTAMP_FORMAT)


# datetime in Python, second-precision UTC string on the wire
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ProductResponse(_WireModel):
    product_id: str = Field(..., alias="productId")
    added_at: Timestamp = Field(..., alias="addedAt")


class WishlistResponse(_WireModel):
    customer_id: str = Field(..., alias="customerId")
    products: List[ProductResponse] = Field(default_factory=list)
    total_items: int = Field(..., alias="totalItems")
    max_items: int = Field(..., alias="maxItems")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "customerId": "cust-001",
                "products": [{"productId": "prod-001", "addedAt": "2024-01-15T10:30:00Z"}],
                "totalItems": 1,
                "maxItems": 20,
            }
        },
    )


class AddProductResponse(_WireModel):
    message: str
    customer_id: str = Field(..., alias="customerId")
    product_id: str = Field(..., alias="productId")
    added_at: Timestamp = Field(..., alias="addedAt")


class ProductExistsResponse(_WireModel):
    customer_id: str = Field(..., alias="customerId")
    product_id: str = Field(..., alias="productId")
    exists: bool = True
    added_at: Timestamp = Field(..., alias="addedAt")


class ApiErrorResponse(_WireModel):
    code: str = Field(..., description="Stable machine-readable error code")
    message: str
    timestamp: Timestamp
    path: str
