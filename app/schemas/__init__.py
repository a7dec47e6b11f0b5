from app.schemas.page import Page
from app.schemas.product_group import (
    ProductGroupCreate,
    ProductGroupUpdate,
    ProductGroupResponse,
)
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

__all__ = [
    "Page",
    "ProductGroupCreate",
    "ProductGroupUpdate",
    "ProductGroupResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
