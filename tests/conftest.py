"""
Fixtures compartilhadas: SQLite em memória e TestClient com get_db sobrescrito
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Product, ProductGroup

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Cria uma sessão de banco de dados para testes"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """TestClient usando a sessão de teste"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def group(db_session):
    """Grupo ativo já persistido"""
    group = ProductGroup(description="Periféricos")
    db_session.add(group)
    db_session.commit()
    db_session.refresh(group)
    return group


@pytest.fixture
def product(db_session, group):
    """Produto persistido no grupo `group`"""
    product = Product(
        barcode="1234567890123",
        description="Cabo HDMI",
        stock_balance=Decimal("5.000"),
        unit_value=Decimal("39.90"),
        stock_value=Decimal("199.50"),
    )
    group.attach_product(product)
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product
