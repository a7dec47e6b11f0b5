from app.database import Base
from app.models.status import Status, StatusType
from app.models.types import ExactNumeric
from app.models.product_group import ProductGroup
from app.models.product import Product

__all__ = [
    "Base",
    "Status",
    "StatusType",
    "ExactNumeric",
    "ProductGroup",
    "Product",
]
