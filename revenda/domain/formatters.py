# revenda/domain/formatters.py
#
# pt-BR display formatting for values printed on documents and in the API.
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

_NAO_DIGITO = re.compile(r"\D")
_CENTAVO = Decimal("0.01")


def _milhar(inteiro: str) -> str:
    """'1234567' -> '1.234.567'"""
    grupos: list[str] = []
    while len(inteiro) > 3:
        grupos.insert(0, inteiro[-3:])
        inteiro = inteiro[:-3]
    grupos.insert(0, inteiro)
    return ".".join(grupos)


def _para_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def format_currency(value: int | float | Decimal) -> str:
    """Moeda BRL: 1234.5 -> 'R$ 1.234,50'; -1 -> '-R$ 1,00'."""
    valor = _para_decimal(value).quantize(_CENTAVO, rounding=ROUND_HALF_UP)
    sinal = "-" if valor < 0 else ""
    inteiro, _, centavos = f"{abs(valor):.2f}".partition(".")
    return f"{sinal}R$ {_milhar(inteiro)},{centavos}"


def clean_phone(phone: str) -> str:
    return _NAO_DIGITO.sub("", phone)


def format_phone(phone: str) -> str:
    """Celular (11 digitos) '(49) 99999-9999', fixo (10 digitos) '(49) 3222-1111'."""
    d = clean_phone(phone)
    if len(d) == 11:
        return f"({d[:2]}) {d[2:7]}-{d[7:]}"
    if len(d) == 10:
        return f"({d[:2]}) {d[2:6]}-{d[6:]}"
    return d


def format_mileage(value: int) -> str:
    """45000 -> '45.000 km'"""
    return f"{_milhar(str(int(value)))} km"


def format_percent(value: int | float | Decimal) -> str:
    """Taxas com duas casas e virgula: 1.89 -> '1,89%'."""
    valor = _para_decimal(value).quantize(_CENTAVO, rounding=ROUND_HALF_UP)
    return f"{valor:.2f}".replace(".", ",") + "%"
