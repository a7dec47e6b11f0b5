from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.status import Status, StatusType


class ProductGroup(Base):
    __tablename__ = "product_groups"
    __table_args__ = (
        CheckConstraint("status IN (0, 1)", name="ck_product_groups_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(120), nullable=False)
    status = Column(StatusType(), nullable=False, default=Status.ACTIVE)

    # Relationships
    # A FK em products.group_id é RESTRICT; o service bloqueia a exclusão antes.
    products = relationship(
        "Product",
        back_populates="group",
        order_by="Product.description",
        passive_deletes="all",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("status", Status.ACTIVE)
        super().__init__(**kwargs)

    def attach_product(self, product) -> None:
        """
        Associa o produto a este grupo, atualizando os dois lados.
        Se o produto pertencia a outro grupo, sai da coleção do grupo anterior.

        A associação passa pelo lado muitos-para-um. O backref só atualiza a
        coleção quando ela já está carregada.
        """
        if product is None or product.group is self:
            return
        product.group = self

    def detach_product(self, product) -> None:
        """
        Desassocia o produto deste grupo.
        Produtos de outro grupo (ou sem grupo) ficam inalterados.
        """
        if product is None or product.group is not self:
            return
        product.group = None

    def __repr__(self) -> str:
        return f"<ProductGroup id={self.id} description={self.description!r}>"
