# revenda/domain/financeiro/simulacao.py
#
# Financing simulator shown to the customer before a proposal is written.
#
# Design decisions:
#   - Bank financing uses the Price table (fixed installments):
#       parcela = financiado * i(1+i)^n / ((1+i)^n - 1)
#     with i the bank's monthly rate for the closest available term
#     (ties go to the shorter term).
#   - CET is an estimate, not the regulatory figure: monthly rate * 12 * 1.15,
#     expressed in % per year.
#   - Own financing carries no interest: parcela = financiado / n.
#   - All money results are quantised to cents. Inputs are Decimal.
#
# Invariants:
#   - valor_financiado > 0 and parcelas > 0, otherwise ValueError.
#   - valor_total is computed from the unrounded installment.
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .bancos import BANCOS, PRAZOS, BancoConfig
from .value_objects import em_centavos

_FATOR_CET = Decimal("1.15")
_MARGEM_LOJA = Decimal("0.05")


@dataclass(frozen=True)
class SimulacaoFinanciamento:
    banco: str
    valor_financiado: Decimal
    parcelas: int
    prazo_taxa: int | None
    taxa_mensal: Decimal
    valor_parcela: Decimal
    valor_total: Decimal
    cet_anual: Decimal
    comissao_vendedor: Decimal
    margem_loja: Decimal


def prazo_mais_proximo(parcelas: int) -> int:
    return min(PRAZOS, key=lambda p: abs(p - parcelas))


def _valor_financiado(valor_veiculo: Decimal, entrada: Decimal, parcelas: int) -> Decimal:
    if parcelas <= 0:
        raise ValueError("Numero de parcelas deve ser positivo")
    financiado = valor_veiculo - entrada
    if financiado <= 0:
        raise ValueError("Valor financiado deve ser positivo (entrada menor que o valor do veiculo)")
    return financiado


def simular_financiamento(
    valor_veiculo: Decimal,
    entrada: Decimal,
    parcelas: int,
    banco: BancoConfig,
) -> SimulacaoFinanciamento:
    """Simula um financiamento bancario pela tabela Price.

    Raises:
        ValueError: se parcelas <= 0 ou se a entrada cobre o valor do veiculo.
    """
    financiado = _valor_financiado(valor_veiculo, entrada, parcelas)
    prazo = prazo_mais_proximo(parcelas)
    taxa = banco.taxa(prazo)
    i = taxa / 100

    if i == 0:
        parcela = financiado / parcelas
    else:
        fator = (1 + i) ** parcelas
        parcela = financiado * (i * fator) / (fator - 1)

    return SimulacaoFinanciamento(
        banco=banco.nome,
        valor_financiado=em_centavos(financiado),
        parcelas=parcelas,
        prazo_taxa=prazo,
        taxa_mensal=taxa,
        valor_parcela=em_centavos(parcela),
        valor_total=em_centavos(parcela * parcelas),
        cet_anual=em_centavos(taxa * 12 * _FATOR_CET),
        comissao_vendedor=em_centavos(financiado * banco.comissao / 100),
        margem_loja=em_centavos(valor_veiculo * _MARGEM_LOJA),
    )


def simular_bancos(valor_veiculo: Decimal, entrada: Decimal, parcelas: int) -> list[SimulacaoFinanciamento]:
    """Simulacao em cada banco externo, da menor para a maior parcela."""
    simulacoes = [
        simular_financiamento(valor_veiculo, entrada, parcelas, banco)
        for banco in BANCOS
        if not banco.is_own
    ]
    return sorted(simulacoes, key=lambda s: s.valor_parcela)


def simular_financiamento_proprio(
    valor_veiculo: Decimal,
    entrada: Decimal,
    parcelas: int,
) -> SimulacaoFinanciamento:
    """Financiamento direto da revenda, sem juros."""
    financiado = _valor_financiado(valor_veiculo, entrada, parcelas)
    return SimulacaoFinanciamento(
        banco="Financiamento Próprio",
        valor_financiado=em_centavos(financiado),
        parcelas=parcelas,
        prazo_taxa=None,
        taxa_mensal=Decimal("0"),
        valor_parcela=em_centavos(financiado / parcelas),
        valor_total=em_centavos(financiado),
        cet_anual=Decimal("0.00"),
        comissao_vendedor=Decimal("0.00"),
        margem_loja=em_centavos(valor_veiculo * _MARGEM_LOJA),
    )
