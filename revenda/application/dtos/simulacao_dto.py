# revenda/application/dtos/simulacao_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from revenda.domain.financeiro.simulacao import SimulacaoFinanciamento


class SimulacaoIn(BaseModel):
    valor_veiculo: Decimal = Field(..., gt=0)
    entrada: Decimal = Field(default=Decimal("0"), ge=0)
    parcelas: int = Field(default=48, ge=1, le=120)
    parcelas_proprio: int = Field(default=12, ge=1, le=120)


class SimulacaoDTO(BaseModel):
    banco: str
    valor_financiado: str
    parcelas: int
    prazo_taxa: int | None
    taxa_mensal: str
    valor_parcela: str
    valor_total: str
    cet_anual: str
    comissao_vendedor: str
    margem_loja: str

    @classmethod
    def from_domain(cls, sim: SimulacaoFinanciamento) -> SimulacaoDTO:
        return cls(
            banco=sim.banco,
            valor_financiado=str(sim.valor_financiado),
            parcelas=sim.parcelas,
            prazo_taxa=sim.prazo_taxa,
            taxa_mensal=str(sim.taxa_mensal),
            valor_parcela=str(sim.valor_parcela),
            valor_total=str(sim.valor_total),
            cet_anual=str(sim.cet_anual),
            comissao_vendedor=str(sim.comissao_vendedor),
            margem_loja=str(sim.margem_loja),
        )


class SimulacoesDTO(BaseModel):
    bancos: list[SimulacaoDTO]
    proprio: SimulacaoDTO
