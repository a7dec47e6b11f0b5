from datetime import date

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.status import Status, StatusType
from app.models.types import ExactNumeric


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("status IN (0, 1)", name="ck_products_status"),
        CheckConstraint("stock_balance >= 0", name="ck_products_stock_balance"),
        CheckConstraint("unit_value >= 0", name="ck_products_unit_value"),
    )

    id = Column(Integer, primary_key=True, index=True)
    barcode = Column(String(50), nullable=False, unique=True, index=True)
    description = Column(String(150), nullable=False)
    stock_balance = Column(ExactNumeric(18, 3), nullable=False, default=0)
    unit_value = Column(ExactNumeric(18, 3), nullable=False, default=0)
    # saldo e valor aceitam 12 dígitos inteiros cada; o produto cabe em 30,2
    stock_value = Column(ExactNumeric(30, 2), nullable=False, default=0)  # sempre recalculado pelo service
    registration_date = Column(Date, nullable=False, default=date.today)
    group_id = Column(
        Integer,
        ForeignKey("product_groups.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status = Column(StatusType(), nullable=False, default=Status.ACTIVE)

    # Relationships
    group = relationship("ProductGroup", back_populates="products")

    def __init__(self, **kwargs):
        kwargs.setdefault("status", Status.ACTIVE)
        kwargs.setdefault("registration_date", date.today())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Product id={self.id} barcode={self.barcode!r}>"
