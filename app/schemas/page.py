from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    content: List[T] = Field(default_factory=list)
    total_elements: int
    total_pages: int
    page: int
    size: int
