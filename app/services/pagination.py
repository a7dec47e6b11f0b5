"""
Paginação de consultas SQLAlchemy
"""
import math
from dataclasses import dataclass, field
from typing import List

MAX_PAGE_SIZE = 200  # limite de segurança, independente do que o cliente pedir


@dataclass
class PageResult:
    items: List = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = MAX_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.size)


def clamp_page_request(page: int, size: int) -> tuple[int, int]:
    """Página mínima 0; tamanho entre 1 e MAX_PAGE_SIZE."""
    effective_page = max(0, page)
    effective_size = max(1, min(size, MAX_PAGE_SIZE))
    return effective_page, effective_size


def paginate(query, page: int, size: int) -> PageResult:
    """Executa a query já ordenada aplicando offset/limit com tamanho limitado."""
    page, size = clamp_page_request(page, size)
    total = query.order_by(None).count()
    items = query.offset(page * size).limit(size).all()
    return PageResult(items=items, total=total, page=page, size=size)
