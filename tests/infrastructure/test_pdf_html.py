# tests/infrastructure/test_pdf_html.py
#
# HTML dos documentos (entrada do weasyprint).
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from revenda.application.dtos.proposta_dto import PropostaDTO, PropostaIn
from revenda.application.dtos.recibo_dto import ReciboDTO
from revenda.domain.cliente.value_objects import CPF, NomeCompleto
from revenda.domain.documento.entities import Recibo
from revenda.domain.documento.value_objects import FormaPagamento, NumeroDocumento, ReferenciaPagamento
from revenda.domain.financeiro.bancos import cores_pdf
from revenda.domain.financeiro.value_objects import ValorMonetario
from revenda.infrastructure import pdf_generator
from revenda.infrastructure.config import Settings
from revenda.infrastructure.empresa import obter_empresa


def _recibo_dto(descricao: str | None = None) -> ReciboDTO:
    recibo = Recibo(
        numero=NumeroDocumento("REC2026010001"),
        pagador_nome=NomeCompleto("Maria da Silva"),
        pagador_cpf=CPF("11144477735"),
        valor=ValorMonetario(Decimal("1234.56")),
        forma_pagamento=FormaPagamento.DINHEIRO,
        referencia=ReferenciaPagamento.ENTRADA,
        data_pagamento=date(2026, 1, 3),
        local="Lages - SC",
        descricao=descricao,
    )
    return ReciboDTO.from_domain(recibo)


def _proposta_dto(banco: str | None, tipo: str = "bancario") -> PropostaDTO:
    body = PropostaIn.model_validate({
        "numero": "PROP1",
        "cliente": {"nome": "Joao Souza", "cpf": "52998224725"},
        "veiculo": {"marca": "VW", "modelo": "Gol", "ano": 2018, "cor": "Prata"},
        "tipo": tipo,
        "banco": banco,
        "valor_veiculo": "40000",
        "valor_total": "40000",
        "data": "2026-01-03",
    })
    return PropostaDTO.from_domain(body.to_domain())


def test_recibo_html_contem_valor_por_extenso_e_empresa() -> None:
    html = pdf_generator.build_html_recibo(_recibo_dto(), obter_empresa(Settings()), cores_pdf())

    assert "RECIBO DE PAGAMENTO" in html
    assert "(Mil duzentos e trinta e quatro reais e cinquenta e seis centavos)" in html
    assert "R$ 1.234,56" in html
    assert "29.030.365/0001-40" in html
    assert "03 de janeiro de 2026" in html
    assert pdf_generator.TEXTO_LEGAL_RECIBO in html
    assert "#1A1A1A" in html


def test_recibo_html_escapa_texto_do_usuario() -> None:
    html = pdf_generator.build_html_recibo(
        _recibo_dto(descricao="<script>alert(1)</script>"), obter_empresa(Settings()), cores_pdf()
    )
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_proposta_html_com_marca_do_banco() -> None:
    html = pdf_generator.build_html_proposta(
        _proposta_dto("Bradesco"), obter_empresa(Settings()), cores_pdf("Bradesco")
    )
    assert "PROPOSTA DE VENDA" in html
    assert "Financiamento: Bradesco" in html
    assert "#CC092F" in html
    assert '<div class="faixa"></div>' not in html


def test_proposta_html_financiamento_proprio_com_faixa_dourada() -> None:
    html = pdf_generator.build_html_proposta(
        _proposta_dto("Financiamento Próprio", tipo="direto"),
        obter_empresa(Settings()),
        cores_pdf("Financiamento Próprio"),
    )
    assert '<div class="faixa"></div>' in html
    assert "Financiamento: " not in html
    assert "Financiamento Direto" in html
    assert "#FFD700" in html


def test_gerar_pdf_sem_weasyprint_levanta_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    import sys

    monkeypatch.setitem(sys.modules, "weasyprint", None)
    with pytest.raises(RuntimeError, match="weasyprint"):
        pdf_generator.gerar_pdf_recibo(_recibo_dto(), obter_empresa(Settings()), cores_pdf())
