# revenda/domain/financeiro/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENTAVO = Decimal("0.01")


def em_centavos(valor: Decimal) -> Decimal:
    """Arredonda para centavos, meio para cima."""
    return valor.quantize(CENTAVO, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ValorMonetario:
    """Valor em reais. Decimal, nunca float. Nunca negativo."""

    valor: Decimal

    def __post_init__(self) -> None:
        if not self.valor.is_finite():
            raise ValueError("Valor precisa ser finito")
        if self.valor < Decimal("0"):
            raise ValueError("Valor nao pode ser negativo")
