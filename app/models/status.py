import enum

from sqlalchemy import Integer
from sqlalchemy.types import TypeDecorator
from app.exceptions import InvalidEnumValue

INVALID_STATUS_MESSAGE = "Status inválido: use 0 (INATIVO) ou 1 (ATIVO)"


class Status(enum.IntEnum):
    INACTIVE = 0
    ACTIVE = 1

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_code(cls, code) -> "Status":
        """
        Converte o código inteiro (0/1) em Status.
        Qualquer outro valor levanta InvalidEnumValue, inclusive None e bool.
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidEnumValue(INVALID_STATUS_MESSAGE)
        try:
            return cls(code)
        except ValueError:
            raise InvalidEnumValue(INVALID_STATUS_MESSAGE)


_LABELS = {
    Status.INACTIVE: "INATIVO",
    Status.ACTIVE: "ATIVO",
}


class StatusType(TypeDecorator):
    """Persiste Status como inteiro na coluna `status`."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return Status.from_code(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Status.from_code(value)
