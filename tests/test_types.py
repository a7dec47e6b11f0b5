"""
Testes para o tipo de coluna ExactNumeric
"""
from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.dialects import postgresql, sqlite

from app.models.types import ExactNumeric


def test_sqlite_stores_text_without_losing_digits():
    column_type = ExactNumeric(30, 2)
    dialect = sqlite.dialect()

    assert isinstance(column_type.load_dialect_impl(dialect), String)
    assert column_type.process_bind_param(Decimal("152415787773510.15"), dialect) == "152415787773510.15"
    assert column_type.process_result_value("152415787773510.15", dialect) == Decimal("152415787773510.15")


def test_result_is_quantized_to_scale():
    column_type = ExactNumeric(18, 3)

    value = column_type.process_result_value("39.9", sqlite.dialect())

    assert value == Decimal("39.900")
    assert value.as_tuple().exponent == -3


def test_postgresql_keeps_native_numeric():
    column_type = ExactNumeric(30, 2)
    dialect = postgresql.dialect()

    impl = column_type.load_dialect_impl(dialect)
    assert isinstance(impl, Numeric)
    assert (impl.precision, impl.scale) == (30, 2)
    assert column_type.process_bind_param(Decimal("7.78"), dialect) == Decimal("7.78")


def test_none_passes_through():
    column_type = ExactNumeric(18, 3)

    assert column_type.process_bind_param(None, sqlite.dialect()) is None
    assert column_type.process_result_value(None, sqlite.dialect()) is None
