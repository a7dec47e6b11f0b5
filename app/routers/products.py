"""
Router para endpoints de produtos
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.page import Page
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/products/all", response_model=List[ProductResponse])
async def list_all_products(
    group_id: Optional[int] = Query(None, description="Filtra pelo grupo do produto"),
    db: Session = Depends(get_db),
):
    """Lista todos os produtos, sem paginação"""
    service = ProductService(db)
    return service.list_all_products(group_id)


@router.get("/products", response_model=Page[ProductResponse])
async def list_products(
    group_id: Optional[int] = Query(None, description="Filtra pelo grupo do produto"),
    page: int = Query(0, description="Número da página (a partir de 0)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Tamanho da página (máximo 200)"),
    db: Session = Depends(get_db),
):
    """
    Lista produtos paginados, ordenados por descrição.

    Retorna:
    - content: produtos da página
    - total_elements: total de produtos que atendem ao filtro
    - total_pages, page, size: dados da paginação efetiva (size nunca passa de 200)
    """
    service = ProductService(db)
    result = service.list_products(group_id, page, size)
    logger.info(f"Products found: {result.total} (page={result.page}, size={result.size})")
    return Page[ProductResponse](
        content=[ProductResponse.model_validate(product) for product in result.items],
        total_elements=result.total,
        total_pages=result.total_pages,
        page=result.page,
        size=result.size,
    )


@router.get("/products/barcode/{barcode}", response_model=ProductResponse)
async def get_product_by_barcode(barcode: str, db: Session = Depends(get_db)):
    """Busca um produto pelo código de barras"""
    service = ProductService(db)
    return service.get_by_barcode(barcode)


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: Session = Depends(get_db)):
    """Busca um produto por ID"""
    service = ProductService(db)
    return service.get_by_id(product_id)


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Cria um novo produto.

    Body:
    {
        "barcode": "7891234567890",
        "description": "Cabo HDMI",
        "group_id": 1,
        "status": 1,
        "unit_value": 39.90,
        "stock_balance": 5
    }

    O valor de estoque (stock_value) é calculado pelo servidor.
    """
    service = ProductService(db)
    product = service.create(product_data)
    response.headers["Location"] = f"{str(request.url).rstrip('/')}/{product.id}"
    return product


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    """Atualiza um produto (substituição completa)"""
    service = ProductService(db)
    return service.update(product_id, product_data)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Remove um produto"""
    service = ProductService(db)
    service.delete(product_id)
