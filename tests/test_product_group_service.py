"""
Testes para o ProductGroupService, incluindo a trava de exclusão
"""
from unittest.mock import patch

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from app.exceptions import IntegrityConflict, NotFound
from app.models.product import Product
from app.models.product_group import ProductGroup
from app.models.status import Status
from app.schemas.product_group import ProductGroupCreate, ProductGroupUpdate
from app.services.product_group_service import ProductGroupService


def test_create_assigns_id_and_default_status(db_session):
    service = ProductGroupService(db_session)

    group = service.create(ProductGroupCreate(description="  Informática  "))

    assert group.id is not None
    assert group.description == "Informática"
    assert group.status is Status.ACTIVE


def test_create_with_inactive_status(db_session):
    service = ProductGroupService(db_session)

    group = service.create(ProductGroupCreate(description="Descontinuados", status=0))

    assert group.status is Status.INACTIVE


def test_get_by_id_not_found(db_session):
    service = ProductGroupService(db_session)

    with pytest.raises(NotFound, match="id=99999"):
        service.get_by_id(99999)


def test_update_replaces_fields_and_keeps_id(db_session, group):
    service = ProductGroupService(db_session)
    original_id = group.id

    updated = service.update(group.id, ProductGroupUpdate(description="Acessórios", status=0))

    assert updated.id == original_id
    assert updated.description == "Acessórios"
    assert updated.status is Status.INACTIVE


def test_update_not_found(db_session):
    service = ProductGroupService(db_session)

    with pytest.raises(NotFound):
        service.update(98765, ProductGroupUpdate(description="Qualquer"))


def test_delete_group_without_products(db_session, group):
    """Testa exclusão de grupo sem produtos"""
    service = ProductGroupService(db_session)
    group_id = group.id

    service.delete(group_id)

    assert db_session.get(ProductGroup, group_id) is None


def test_delete_group_with_products_is_rejected(db_session, group, product):
    """Testa que grupo com produtos não pode ser removido e nada muda"""
    service = ProductGroupService(db_session)
    group_id = group.id

    with pytest.raises(IntegrityConflict, match="possui produtos associados"):
        service.delete(group_id)

    remaining = db_session.get(ProductGroup, group_id)
    assert remaining is not None
    assert remaining.description == "Periféricos"
    assert db_session.query(Product).filter(Product.group_id == group_id).count() == 1


def test_delete_group_not_found(db_session):
    service = ProductGroupService(db_session)

    with pytest.raises(NotFound):
        service.delete(12345)


def test_delete_group_after_removing_its_products(db_session, group, product):
    db_session.delete(product)
    db_session.commit()
    service = ProductGroupService(db_session)

    service.delete(group.id)

    assert db_session.query(ProductGroup).count() == 0


def test_foreign_key_blocks_delete_at_database_level(db_session, group, product):
    """Testa que a FK RESTRICT também impede a exclusão direta no banco"""
    with pytest.raises(IntegrityError):
        db_session.execute(delete(ProductGroup).where(ProductGroup.id == group.id))
        db_session.flush()
    db_session.rollback()

    assert db_session.query(ProductGroup).count() == 1


def test_delete_translates_foreign_key_error(db_session, group, product):
    """Testa que a FK RESTRICT vira IntegrityConflict quando a checagem prévia não pega"""
    service = ProductGroupService(db_session)
    group_id = group.id

    with patch.object(ProductGroupService, "_has_products", return_value=False):
        with pytest.raises(IntegrityConflict, match="possui produtos associados"):
            service.delete(group_id)

    assert db_session.get(ProductGroup, group_id) is not None
    assert db_session.query(Product).filter(Product.group_id == group_id).count() == 1


def test_list_all_ordered_by_description(db_session):
    service = ProductGroupService(db_session)
    service.create(ProductGroupCreate(description="Limpeza"))
    service.create(ProductGroupCreate(description="Bebidas"))
    service.create(ProductGroupCreate(description="Hortifruti"))

    descriptions = [g.description for g in service.list_all()]

    assert descriptions == ["Bebidas", "Hortifruti", "Limpeza"]


def test_list_page_clamps_size(db_session, group):
    service = ProductGroupService(db_session)

    result = service.list_page(page=-1, size=1000)

    assert result.page == 0
    assert result.size == 200
    assert result.total == 1
    assert [g.id for g in result.items] == [group.id]
