# revenda/domain/documento/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from revenda.domain.cliente.entities import Cliente
from revenda.domain.cliente.value_objects import CPF, NomeCompleto
from revenda.domain.financeiro.value_objects import ValorMonetario

from .value_objects import Cambio, Combustivel, FormaPagamento, NumeroDocumento, ReferenciaPagamento, TipoProposta


@dataclass(frozen=True)
class Veiculo:
    marca: str
    modelo: str
    ano: int
    cor: str
    combustivel: Combustivel = Combustivel.FLEX
    cambio: Cambio = Cambio.MANUAL
    placa: str | None = None
    quilometragem: int | None = None

    @property
    def descricao(self) -> str:
        return f"{self.marca} {self.modelo}"


@dataclass(frozen=True)
class Recibo:
    numero: NumeroDocumento
    pagador_nome: NomeCompleto
    pagador_cpf: CPF
    valor: ValorMonetario
    forma_pagamento: FormaPagamento
    referencia: ReferenciaPagamento
    data_pagamento: date
    local: str
    descricao: str | None = None
    veiculo: Veiculo | None = None
    vendedor: str | None = None


@dataclass(frozen=True)
class Proposta:
    numero: NumeroDocumento
    cliente: Cliente
    veiculo: Veiculo
    tipo: TipoProposta
    valor_veiculo: ValorMonetario
    entrada: ValorMonetario
    valor_financiado: ValorMonetario
    parcelas: int
    valor_parcela: ValorMonetario
    valor_total: ValorMonetario
    data: date
    banco: str | None = None
    vendedor: str | None = None
    observacoes: str | None = None

    def __post_init__(self) -> None:
        if self.parcelas < 1:
            raise ValueError("Proposta precisa de ao menos 1 parcela")
        if self.tipo is TipoProposta.BANCARIO and not self.banco:
            raise ValueError("Proposta bancaria precisa informar o banco")
