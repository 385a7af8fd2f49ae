# revenda/domain/financeiro/bancos.py
#
# Banks the dealership works with: visual identity for documents plus the
# monthly rates and seller commission used by the financing simulator.
#
# Design decisions:
#   - Static table. Rates are monthly percentages per term (12..60 months).
#   - Name lookup is partial and case-insensitive because proposals store the
#     bank as free text ("BV Financeira", "Banco Bradesco", ...).
#   - Own financing ("Financiamento Próprio") and unknown banks print with the
#     dealership colours (black and gold).
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

Rgb = tuple[int, int, int]

PRAZOS = (12, 24, 36, 48, 60)


@dataclass(frozen=True)
class BancoConfig:
    id: str
    nome: str
    slug: str
    cor_hex: str
    is_own: bool
    taxas: tuple[Decimal, ...]  # mesma ordem de PRAZOS, % ao mes
    comissao: Decimal  # % do valor financiado pago ao vendedor

    def taxa(self, prazo: int) -> Decimal:
        return self.taxas[PRAZOS.index(prazo)]


def _taxas(*valores: str) -> tuple[Decimal, ...]:
    return tuple(Decimal(v) for v in valores)


BANCOS: tuple[BancoConfig, ...] = (
    BancoConfig(
        id="bv",
        nome="BV Financeira",
        slug="bv-financeira",
        cor_hex="#003A70",
        is_own=False,
        taxas=_taxas("1.89", "1.99", "2.09", "2.19", "2.29"),
        comissao=Decimal("2.5"),
    ),
    BancoConfig(
        id="bradesco",
        nome="Bradesco",
        slug="bradesco",
        cor_hex="#CC092F",
        is_own=False,
        taxas=_taxas("1.79", "1.89", "1.99", "2.09", "2.19"),
        comissao=Decimal("2.0"),
    ),
    BancoConfig(
        id="c6",
        nome="C6 Bank",
        slug="c6-bank",
        cor_hex="#1A1A1A",
        is_own=False,
        taxas=_taxas("1.69", "1.79", "1.89", "1.99", "2.09"),
        comissao=Decimal("1.8"),
    ),
    BancoConfig(
        id="proprio",
        nome="Financiamento Próprio Autos da Serra",
        slug="autos-da-serra",
        cor_hex="#FFD700",
        is_own=True,
        taxas=_taxas("2.49", "2.59", "2.69", "2.79", "2.89"),
        comissao=Decimal("5.0"),
    ),
)

_POR_ID = {b.id: b for b in BANCOS}


def obter_banco_por_nome(nome: str | None) -> BancoConfig | None:
    """Encontra o banco por trecho do nome. None se nao reconhecido."""
    if not nome:
        return None
    lower = nome.lower()
    if "próprio" in lower or "proprio" in lower or "autos da serra" in lower:
        return _POR_ID["proprio"]
    for fragmento, banco_id in (("bv", "bv"), ("bradesco", "bradesco"), ("c6", "c6")):
        if fragmento in lower:
            return _POR_ID[banco_id]
    return None


@dataclass(frozen=True)
class CoresPDF:
    primaria: Rgb
    secundaria: Rgb
    texto: Rgb
    is_own: bool

    @staticmethod
    def _hex(rgb: Rgb) -> str:
        return "#{:02X}{:02X}{:02X}".format(*rgb)

    @property
    def primaria_hex(self) -> str:
        return self._hex(self.primaria)

    @property
    def secundaria_hex(self) -> str:
        return self._hex(self.secundaria)

    @property
    def texto_hex(self) -> str:
        return self._hex(self.texto)


_CORES_REVENDA = CoresPDF(primaria=(26, 26, 26), secundaria=(255, 215, 0), texto=(255, 255, 255), is_own=True)

_CORES_BANCO: dict[str, CoresPDF] = {
    "bv": CoresPDF(primaria=(0, 58, 112), secundaria=(0, 120, 180), texto=(255, 255, 255), is_own=False),
    "bradesco": CoresPDF(primaria=(204, 9, 47), secundaria=(160, 7, 37), texto=(255, 255, 255), is_own=False),
    "c6": CoresPDF(primaria=(26, 26, 26), secundaria=(64, 64, 64), texto=(255, 255, 255), is_own=False),
}


def cores_pdf(nome_banco: str | None = None) -> CoresPDF:
    """Cores do documento conforme o banco da proposta."""
    banco = obter_banco_por_nome(nome_banco)
    if banco is None or banco.is_own:
        return _CORES_REVENDA
    return _CORES_BANCO.get(banco.id, _CORES_REVENDA)
