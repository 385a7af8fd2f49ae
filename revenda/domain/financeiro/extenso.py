# revenda/domain/financeiro/extenso.py
#
# Valor monetario por extenso em portugues do Brasil (recibos, contratos).
#
# Floats are read through repr(). Cents are rounded half-up before reais and
# centavos are split, so 0.999 is "Um real". Sign is dropped; non-finite or
# non-numeric input is "Zero reais", and so is any amount at or above
# VALOR_MAXIMO (a quintillion reais).
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_UNIDADES = ("zero", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove")
_DEZ_A_DEZENOVE = (
    "dez", "onze", "doze", "treze", "quatorze",
    "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
)
_DEZENAS = ("", "", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa")
_CENTENAS = (
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
)

# (singular, plural) de cada grupo de tres digitos acima das unidades.
_ESCALAS = (
    ("mil", "mil"),
    ("milhão", "milhões"),
    ("bilhão", "bilhões"),
    ("trilhão", "trilhões"),
)

_UM_MILHAO = 1_000_000

VALOR_MAXIMO = Decimal(10) ** 18
_CENTAVO = Decimal("0.01")


def _ate_99(n: int) -> str:
    if n < 10:
        return _UNIDADES[n]
    if n < 20:
        return _DEZ_A_DEZENOVE[n - 10]
    dezena, unidade = divmod(n, 10)
    if unidade == 0:
        return _DEZENAS[dezena]
    return f"{_DEZENAS[dezena]} e {_UNIDADES[unidade]}"


def _ate_999(n: int) -> str:
    """0-999 por extenso. 100 exato e "cem"; 101-199 usam "cento"."""
    if n < 100:
        return _ate_99(n)
    if n == 100:
        return "cem"
    centena, resto = divmod(n, 100)
    if resto == 0:
        return _CENTENAS[centena]
    return f"{_CENTENAS[centena]} e {_ate_99(resto)}"


def _quantidade(n: int) -> str:
    # Only the topmost scale can exceed 999 (e.g. "mil trilhões").
    return _ate_999(n) if n < 1000 else _inteiro_por_extenso(n)


def _segmento(quantidade: int, escala: int) -> str:
    """Um grupo com o nome da sua escala. Escala 0 = unidades, 1 = mil, 2 = milhao..."""
    if escala == 0:
        return _ate_999(quantidade)
    singular, plural = _ESCALAS[escala - 1]
    if quantidade == 1:
        return "mil" if escala == 1 else f"um {singular}"
    return f"{_quantidade(quantidade)} {plural}"


def _inteiro_por_extenso(n: int) -> str:
    grupos: list[tuple[int, int]] = []
    for escala in range(len(_ESCALAS)):
        n, q = divmod(n, 1000)
        grupos.append((q, escala))
    grupos.append((n, len(_ESCALAS)))

    presentes = [(q, e) for q, e in reversed(grupos) if q]
    if not presentes:
        return _UNIDADES[0]

    textos = [_segmento(q, e) for q, e in presentes]
    ultimo = presentes[-1][0]
    if len(textos) > 1 and (ultimo < 100 or ultimo % 100 == 0):
        return " ".join(textos[:-1]) + " e " + textos[-1]
    return " ".join(textos)


def _como_decimal(value: object) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, float):
        dec = Decimal(repr(value))
    else:
        return None
    if not dec.is_finite() or dec.copy_abs() >= VALOR_MAXIMO:
        return None
    return dec


def _reais_e_centavos(valor: Decimal) -> tuple[int, int]:
    """Arredonda |valor| para centavos (half-up) e separa a parte inteira."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, 24)
        total = int(valor.copy_abs().quantize(_CENTAVO, rounding=ROUND_HALF_UP) * 100)
    reais, centavos = divmod(total, 100)
    return reais, centavos


def number_to_words(value: int | float | Decimal) -> str:
    """Escreve um valor em reais por extenso.

    >>> number_to_words(1234.56)
    'Mil duzentos e trinta e quatro reais e cinquenta e seis centavos'
    >>> number_to_words(0.5)
    'Cinquenta centavos'
    """
    valor = _como_decimal(value)
    if valor is None:
        return "Zero reais"

    reais, centavos = _reais_e_centavos(valor)
    if reais >= VALOR_MAXIMO or (reais == 0 and centavos == 0):
        return "Zero reais"

    partes: list[str] = []
    if reais:
        if reais == 1:
            moeda = "real"
        elif reais % _UM_MILHAO == 0:
            moeda = "de reais"
        else:
            moeda = "reais"
        partes.append(f"{_inteiro_por_extenso(reais)} {moeda}")
    if centavos:
        partes.append(f"{_ate_99(centavos)} {'centavo' if centavos == 1 else 'centavos'}")

    texto = " e ".join(partes)
    return texto[0].upper() + texto[1:]
