"""
Service para grupos de produto
"""
import logging
from typing import List

from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.exceptions import IntegrityConflict, NotFound
from app.models.product import Product
from app.models.product_group import ProductGroup
from app.schemas.product_group import ProductGroupCreate, ProductGroupUpdate
from app.services.pagination import PageResult, paginate

logger = logging.getLogger(__name__)


class ProductGroupService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[ProductGroup]:
        """Retorna todos os grupos ordenados por descrição"""
        return self.db.query(ProductGroup).order_by(ProductGroup.description, ProductGroup.id).all()

    def list_page(self, page: int, size: int) -> PageResult:
        """Retorna uma página de grupos ordenados por descrição"""
        query = self.db.query(ProductGroup).order_by(ProductGroup.description, ProductGroup.id)
        return paginate(query, page, size)

    def get_by_id(self, group_id: int) -> ProductGroup:
        """Retorna um grupo por ID ou levanta NotFound"""
        group = self.db.get(ProductGroup, group_id)
        if group is None:
            raise NotFound(f"Grupo de Produto não encontrado: id={group_id}")
        return group

    def create(self, group_data: ProductGroupCreate) -> ProductGroup:
        """Cria um novo grupo; o id é sempre gerado pelo banco"""
        group = ProductGroup(
            description=group_data.description,
            status=group_data.status,
        )
        self.db.add(group)
        self.db.commit()
        self.db.refresh(group)
        logger.info(f"Grupo de produto criado: id={group.id}")
        return group

    def update(self, group_id: int, group_data: ProductGroupUpdate) -> ProductGroup:
        """Atualiza (PUT completo) descrição e status; o id não muda"""
        group = self.get_by_id(group_id)
        group.description = group_data.description
        group.status = group_data.status
        self.db.commit()
        self.db.refresh(group)
        logger.info(f"Grupo de produto atualizado: id={group.id}")
        return group

    def _has_products(self, group_id: int) -> bool:
        return self.db.query(exists().where(Product.group_id == group_id)).scalar()

    def delete(self, group_id: int) -> None:
        """
        Remove o grupo se nenhum produto o referencia.

        A linha do grupo é travada (SELECT ... FOR UPDATE) antes da checagem,
        então um INSERT concorrente de produto apontando para ele espera o fim
        desta transação. A FK RESTRICT em products.group_id cobre o resto.
        """
        group = (
            self.db.query(ProductGroup)
            .filter(ProductGroup.id == group_id)
            .with_for_update()
            .first()
        )
        if group is None:
            self.db.rollback()
            raise NotFound(f"Grupo de Produto não encontrado: id={group_id}")

        if self._has_products(group_id):
            self.db.rollback()
            logger.warning(f"Exclusão bloqueada, grupo possui produtos: id={group_id}")
            raise IntegrityConflict(
                f"Grupo de produto possui produtos associados e não pode ser removido: id={group_id}"
            )

        try:
            self.db.delete(group)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"FK bloqueou exclusão do grupo id={group_id}: {e}")
            raise IntegrityConflict(
                f"Grupo de produto possui produtos associados e não pode ser removido: id={group_id}"
            )
        logger.info(f"Grupo de produto removido: id={group_id}")
