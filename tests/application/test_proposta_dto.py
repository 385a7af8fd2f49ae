from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from revenda.application.dtos.privacidade import CPF_OCULTO, TELEFONE_OCULTO, VALOR_OCULTO
from revenda.application.dtos.proposta_dto import PropostaDTO, PropostaIn


def _payload(**kwargs: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "numero": "PROP2026010001",
        "cliente": {"nome": "Joao Souza", "cpf": "529.982.247-25", "telefone": "49999998888"},
        "veiculo": {
            "marca": "Fiat",
            "modelo": "Uno",
            "ano": 2015,
            "cor": "Branco",
            "combustivel": "flex",
            "cambio": "manual",
            "placa": "ABC1D23",
        },
        "tipo": "bancario",
        "banco": "Bradesco",
        "valor_veiculo": "30000",
        "entrada": "6000",
        "valor_financiado": "24000",
        "parcelas": 48,
        "valor_parcela": "1234.56",
        "valor_total": "59258.88",
        "data": "2026-01-03",
        "vendedor": "Carlos",
    }
    payload.update(kwargs)
    return payload


def test_proposta_bancaria():
    proposta = PropostaIn.model_validate(_payload()).to_domain()
    dto = PropostaDTO.from_domain(proposta)

    assert dto.cliente_cpf == "529.982.247-25"
    assert dto.cliente_telefone == "(49) 99999-8888"
    assert dto.tipo_financiamento == "Banco: Bradesco"
    assert dto.parcelas == "48x de R$ 1.234,56"
    assert dto.valor_total == "R$ 59.258,88"
    assert dto.combustivel == "Flex"
    assert dto.placa == "ABC1D23"
    assert dto.data == "03/01/2026"


def test_proposta_financiamento_proprio():
    proposta = PropostaIn.model_validate(_payload(tipo="direto", banco="Financiamento Próprio")).to_domain()
    assert PropostaDTO.from_domain(proposta).tipo_financiamento == "Financiamento Direto"


def test_proposta_a_vista():
    proposta = PropostaIn.model_validate(_payload(tipo="avista", banco=None, parcelas=1)).to_domain()
    assert PropostaDTO.from_domain(proposta).tipo_financiamento == "À vista"


def test_proposta_privacidade():
    proposta = PropostaIn.model_validate(_payload()).to_domain()
    dto = PropostaDTO.from_domain(proposta, privacidade=True)

    assert dto.cliente_nome == "Joao ***"
    assert dto.cliente_cpf == CPF_OCULTO
    assert dto.cliente_telefone == TELEFONE_OCULTO
    assert dto.valor_veiculo == VALOR_OCULTO
    assert dto.parcelas == f"48x de {VALOR_OCULTO}"
    assert dto.placa is None


def test_cpf_do_cliente_invalido():
    body = PropostaIn.model_validate(_payload(cliente={"nome": "Joao", "cpf": "123.456.789-00"}))
    with pytest.raises(ValueError, match="CPF invalido"):
        body.to_domain()


def test_valor_negativo_rejeitado_na_entrada():
    with pytest.raises(ValidationError):
        PropostaIn.model_validate(_payload(valor_total="-1"))
