"""
Router para endpoints de grupos de produto
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.page import Page
from app.schemas.product_group import ProductGroupCreate, ProductGroupResponse, ProductGroupUpdate
from app.services.product_group_service import ProductGroupService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/product-groups/all", response_model=List[ProductGroupResponse])
async def list_all_product_groups(db: Session = Depends(get_db)):
    """Lista todos os grupos, sem paginação"""
    service = ProductGroupService(db)
    return service.list_all()


@router.get("/product-groups", response_model=Page[ProductGroupResponse])
async def list_product_groups(
    page: int = Query(0, description="Número da página (a partir de 0)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Tamanho da página (máximo 200)"),
    db: Session = Depends(get_db),
):
    """Lista grupos paginados, ordenados por descrição"""
    service = ProductGroupService(db)
    result = service.list_page(page, size)
    return Page[ProductGroupResponse](
        content=[ProductGroupResponse.model_validate(group) for group in result.items],
        total_elements=result.total,
        total_pages=result.total_pages,
        page=result.page,
        size=result.size,
    )


@router.get("/product-groups/{group_id}", response_model=ProductGroupResponse)
async def get_product_group(group_id: int, db: Session = Depends(get_db)):
    """Busca um grupo por ID"""
    service = ProductGroupService(db)
    return service.get_by_id(group_id)


@router.post("/product-groups", response_model=ProductGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_product_group(
    group_data: ProductGroupCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Cria um novo grupo de produto.

    Body:
    {
        "description": "Periféricos",
        "status": 1
    }
    """
    service = ProductGroupService(db)
    group = service.create(group_data)
    response.headers["Location"] = f"{str(request.url).rstrip('/')}/{group.id}"
    return group


@router.put("/product-groups/{group_id}", response_model=ProductGroupResponse)
async def update_product_group(
    group_id: int,
    group_data: ProductGroupUpdate,
    db: Session = Depends(get_db),
):
    """Atualiza um grupo (substituição completa)"""
    service = ProductGroupService(db)
    return service.update(group_id, group_data)


@router.delete("/product-groups/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_group(group_id: int, db: Session = Depends(get_db)):
    """
    Remove um grupo.
    Retorna 409 se ainda houver produtos associados ao grupo.
    """
    service = ProductGroupService(db)
    service.delete(group_id)
