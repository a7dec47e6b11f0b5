"""
Cálculo do valor de estoque (saldo x valor unitário).

O valor é derivado: nunca vem do cliente e é recalculado pelo ProductService
imediatamente antes de cada inserção e de cada atualização.
"""
from decimal import Decimal, ROUND_HALF_UP, localcontext

STOCK_VALUE_QUANTUM = Decimal("0.01")

# Numeric(18, 3) x Numeric(18, 3) cabe com folga em 60 dígitos
_CALC_PRECISION = 60


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def compute_stock_value(stock_balance, unit_value) -> Decimal:
    """
    Retorna saldo x valor unitário com 2 casas decimais, arredondamento HALF_UP.

    Operandos ausentes (None) contam como zero apenas para este cálculo.
    O produto é exato antes da quantização, então 1.005 x 1.005 = 1.010025
    resulta em 1.01.
    """
    balance = _to_decimal(stock_balance)
    value = _to_decimal(unit_value)
    with localcontext() as ctx:
        ctx.prec = _CALC_PRECISION
        return (balance * value).quantize(STOCK_VALUE_QUANTUM, rounding=ROUND_HALF_UP)


def refresh_stock_value(product):
    """Sobrescreve product.stock_value com o valor calculado."""
    product.stock_value = compute_stock_value(product.stock_balance, product.unit_value)
    return product
