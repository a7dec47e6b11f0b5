"""
Schemas Pydantic para produtos

O valor de estoque não faz parte da entrada: é sempre calculado no service.
"""
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.models.status import Status


class ProductBase(BaseModel):
    barcode: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1, max_length=150)
    group_id: int = Field(..., description="ID do grupo do produto")
    status: Status = Field(default=Status.ACTIVE, description="0 = INATIVO, 1 = ATIVO")
    unit_value: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)
    stock_balance: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=3)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value):
        return Status.from_code(value)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductResponse(BaseModel):
    id: int
    barcode: str
    description: str
    group_id: int
    status: int
    unit_value: Decimal
    stock_balance: Decimal
    stock_value: Decimal
    registration_date: date

    model_config = ConfigDict(from_attributes=True)
