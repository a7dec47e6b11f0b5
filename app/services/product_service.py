"""
Service para produtos
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from app.exceptions import IntegrityConflict, NotFound, ValidationError
from app.models.product import Product
from app.models.product_group import ProductGroup
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.pagination import PageResult, paginate
from app.services.stock_value import refresh_stock_value

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def _ordered_query(self, group_id: Optional[int] = None):
        query = self.db.query(Product)
        if group_id is not None:
            query = query.filter(Product.group_id == group_id)
        return query.order_by(Product.description, Product.id)

    def _get_group(self, group_id: int) -> ProductGroup:
        group = self.db.get(ProductGroup, group_id)
        if group is None:
            raise NotFound(f"Grupo do produto não encontrado: id={group_id}")
        return group

    def _ensure_barcode_available(self, barcode: str, product_id: Optional[int] = None) -> None:
        query = self.db.query(Product.id).filter(Product.barcode == barcode)
        if product_id is not None:
            query = query.filter(Product.id != product_id)
        if query.first() is not None:
            raise IntegrityConflict(f"Código de barras já cadastrado: codigoBarra={barcode}")

    def _commit(self, product: Product) -> Product:
        barcode = product.barcode
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Erro de integridade ao salvar produto: {e}")
            raise IntegrityConflict(
                f"Erro de integridade ao salvar produto. Verifique se o código de barras já existe: "
                f"codigoBarra={barcode}"
            )
        except DataError as e:
            self.db.rollback()
            logger.warning(f"Valor fora dos limites ao salvar produto: {e}")
            raise ValidationError(
                f"Valores numéricos do produto excedem os limites de armazenamento: "
                f"codigoBarra={barcode}"
            )
        self.db.refresh(product)
        return product

    def list_products(self, group_id: Optional[int], page: int, size: int) -> PageResult:
        """
        Lista paginada, opcionalmente filtrada por grupo.
        O tamanho da página nunca passa de MAX_PAGE_SIZE.
        """
        if group_id is not None:
            self._get_group(group_id)
        return paginate(self._ordered_query(group_id), page, size)

    def list_all_products(self, group_id: Optional[int] = None) -> List[Product]:
        """Lista sem paginação, opcionalmente filtrada por grupo"""
        if group_id is not None:
            self._get_group(group_id)
        return self._ordered_query(group_id).all()

    def get_by_id(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if product is None:
            raise NotFound(f"Produto não encontrado: id={product_id}")
        return product

    def get_by_barcode(self, barcode: Optional[str]) -> Product:
        """Busca por código de barras; espaços nas pontas são ignorados"""
        if barcode is None or not barcode.strip():
            raise ValidationError("Código de Barra do Produto é obrigatório")
        normalized = barcode.strip()
        product = self.db.query(Product).filter(Product.barcode == normalized).first()
        if product is None:
            raise NotFound(f"Produto não encontrado: codigoBarra={normalized}")
        return product

    def create(self, product_data: ProductCreate) -> Product:
        """
        Cria um produto vinculado a um grupo existente.
        O valor de estoque é sempre calculado aqui, nunca recebido.
        """
        group = self._get_group(product_data.group_id)
        self._ensure_barcode_available(product_data.barcode)

        product = Product(
            barcode=product_data.barcode,
            description=product_data.description,
            stock_balance=product_data.stock_balance,
            unit_value=product_data.unit_value,
            status=product_data.status,
        )
        group.attach_product(product)
        refresh_stock_value(product)

        self.db.add(product)
        self._commit(product)
        logger.info(f"Produto criado: id={product.id} grupo={group.id}")
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """Atualização completa (PUT); o id e a data de cadastro não mudam"""
        product = self.get_by_id(product_id)
        group = self._get_group(product_data.group_id)
        self._ensure_barcode_available(product_data.barcode, product_id=product.id)

        product.barcode = product_data.barcode
        product.description = product_data.description
        product.stock_balance = product_data.stock_balance
        product.unit_value = product_data.unit_value
        product.status = product_data.status
        if product.group is not group:
            group.attach_product(product)
        refresh_stock_value(product)

        self._commit(product)
        logger.info(f"Produto atualizado: id={product.id} grupo={group.id}")
        return product

    def delete(self, product_id: int) -> None:
        product = self.get_by_id(product_id)
        self.db.delete(product)
        self.db.commit()
        logger.info(f"Produto removido: id={product_id}")
