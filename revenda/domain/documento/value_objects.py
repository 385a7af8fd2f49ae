# revenda/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormaPagamento(Enum):
    DINHEIRO = "dinheiro"
    PIX = "pix"
    TRANSFERENCIA = "transferencia"
    CARTAO = "cartao"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_FORMA[self]


class ReferenciaPagamento(Enum):
    ENTRADA = "entrada"
    SINAL = "sinal"
    PARCIAL = "parcial"
    QUITACAO = "quitacao"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_REFERENCIA[self]


class TipoProposta(Enum):
    BANCARIO = "bancario"
    DIRETO = "direto"
    AVISTA = "avista"


class Combustivel(Enum):
    FLEX = "flex"
    GASOLINA = "gasolina"
    ETANOL = "etanol"
    DIESEL = "diesel"
    ELETRICO = "eletrico"
    HIBRIDO = "hibrido"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_COMBUSTIVEL[self]


class Cambio(Enum):
    MANUAL = "manual"
    AUTOMATICO = "automatico"
    CVT = "cvt"
    AUTOMATIZADO = "automatizado"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_CAMBIO[self]


_ROTULOS_FORMA = {
    FormaPagamento.DINHEIRO: "Dinheiro",
    FormaPagamento.PIX: "PIX",
    FormaPagamento.TRANSFERENCIA: "Transferência Bancária",
    FormaPagamento.CARTAO: "Cartão",
}

_ROTULOS_REFERENCIA = {
    ReferenciaPagamento.ENTRADA: "ENTRADA",
    ReferenciaPagamento.SINAL: "SINAL",
    ReferenciaPagamento.PARCIAL: "PAGAMENTO PARCIAL",
    ReferenciaPagamento.QUITACAO: "QUITAÇÃO",
}

_ROTULOS_COMBUSTIVEL = {
    Combustivel.FLEX: "Flex",
    Combustivel.GASOLINA: "Gasolina",
    Combustivel.ETANOL: "Etanol",
    Combustivel.DIESEL: "Diesel",
    Combustivel.ELETRICO: "Elétrico",
    Combustivel.HIBRIDO: "Híbrido",
}

_ROTULOS_CAMBIO = {
    Cambio.MANUAL: "Manual",
    Cambio.AUTOMATICO: "Automático",
    Cambio.CVT: "CVT",
    Cambio.AUTOMATIZADO: "Automatizado",
}


@dataclass(frozen=True)
class NumeroDocumento:
    """Numero impresso no documento (ex: REC2026010042). Nao-vazio, trimado."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Numero do documento nao pode ser vazio")
        object.__setattr__(self, "valor", stripped)
