from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from revenda.interfaces.api.main import app


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def recibo_payload() -> dict[str, object]:
    return {
        "numero": "REC2026010001",
        "pagador_nome": "Maria da Silva",
        "pagador_cpf": "111.444.777-35",
        "valor": "1234.56",
        "forma_pagamento": "pix",
        "referencia": "entrada",
        "data_pagamento": "2026-01-03",
        "veiculo": {"marca": "Fiat", "modelo": "Uno", "ano": 2015, "cor": "Branco"},
        "vendedor": "Carlos",
    }


@pytest.fixture()
def proposta_payload() -> dict[str, object]:
    return {
        "numero": "PROP2026010001",
        "cliente": {"nome": "Joao Souza", "cpf": "52998224725", "telefone": "49999998888"},
        "veiculo": {"marca": "VW", "modelo": "Gol", "ano": 2018, "cor": "Prata", "placa": "ABC1D23"},
        "tipo": "bancario",
        "banco": "BV Financeira",
        "valor_veiculo": "40000",
        "entrada": "10000",
        "valor_financiado": "30000",
        "parcelas": 48,
        "valor_parcela": "980.12",
        "valor_total": "57045.76",
        "data": "2026-01-03",
    }
