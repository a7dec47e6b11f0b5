"""
Exceções de domínio do catálogo.

Os handlers registrados em app.main traduzem cada tipo para um status HTTP:
NotFound -> 404, IntegrityConflict -> 409, ValidationError -> 400.
"""


class CatalogError(Exception):
    """Exceção base para erros do catálogo"""

    def __init__(self, message: str = "Erro no catálogo") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFound(CatalogError):
    """Entidade referenciada (produto, grupo) não existe"""
    pass


class IntegrityConflict(CatalogError):
    """Operação bloqueada por um registro dependente ou por unicidade"""
    pass


class ValidationError(CatalogError):
    """Entrada malformada ou campo obrigatório ausente"""
    pass


class InvalidEnumValue(ValidationError, ValueError):
    """
    Código de status fora de {0, 1}.

    Também é ValueError para que o pydantic o converta em erro de campo
    quando levantado dentro de um validator.
    """
    pass
