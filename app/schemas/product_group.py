from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.models.status import Status


class ProductGroupBase(BaseModel):
    description: str = Field(..., min_length=1, max_length=120)
    status: Status = Field(
        default=Status.ACTIVE,
        description="0 = INATIVO, 1 = ATIVO",
    )

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value):
        return Status.from_code(value)


class ProductGroupCreate(ProductGroupBase):
    pass


class ProductGroupUpdate(ProductGroupBase):
    pass


class ProductGroupResponse(BaseModel):
    id: int
    description: str
    status: int

    model_config = ConfigDict(from_attributes=True)
