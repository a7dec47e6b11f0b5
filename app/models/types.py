from decimal import Decimal, localcontext

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


class ExactNumeric(TypeDecorator):
    """
    Numeric que preserva Decimal em todos os bancos.

    O SQLite não tem tipo decimal e o driver converte para float, perdendo
    dígitos acima de ~15 algarismos. Nele o valor é gravado como texto.
    Nos demais bancos a coluna é NUMERIC(precision, scale) normal.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(self.impl.precision + 2))
        return dialect.type_descriptor(self.impl)

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return str(self._quantize(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self._quantize(value)

    def _quantize(self, value) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = self.impl.precision + 2
            return Decimal(str(value)).quantize(Decimal(1).scaleb(-self.impl.scale))
