import dataclasses

import pytest

from revenda.domain.empresa.entities import Empresa
from revenda.domain.empresa.value_objects import CNPJ, Endereco, format_cnpj, is_valid_cnpj


def test_cnpj_da_revenda_valido():
    """CNPJ padrao impresso nos documentos passa na verificacao."""
    cnpj = CNPJ("29.030.365/0001-40")
    assert cnpj.valor == "29030365000140"
    assert cnpj.formatado == "29.030.365/0001-40"


def test_cnpj_digitos_verificadores_invalidos():
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    with pytest.raises(ValueError):
        CNPJ("11111111111111")


def test_cnpj_comprimento_errado():
    with pytest.raises(ValueError, match="esperado 14"):
        CNPJ("123")


def test_cnpj_com_digitos_nao_ascii_invalido():
    # "\u0662" e o digito arabe-indico 2: casa com \d mas nao e ASCII.
    with pytest.raises(ValueError, match="ASCII"):
        CNPJ("\u06629030365000140")
    assert is_valid_cnpj("\u06629030365000140") is False


def test_cnpj_entrada_nao_string():
    with pytest.raises(ValueError, match="CNPJ invalido: esperado texto"):
        CNPJ(None)  # type: ignore[arg-type]
    assert is_valid_cnpj(29030365000140) is False  # type: ignore[arg-type]


def test_is_valid_e_format_cnpj():
    assert is_valid_cnpj("29.030.365/0001-40") is True
    assert is_valid_cnpj("11.222.333/0001-99") is False
    assert format_cnpj("11222333000181") == "11.222.333/0001-81"
    assert format_cnpj("123") == "123"


def test_cnpj_imutavel():
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj.valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_e_repr():
    a = CNPJ("11222333000181")
    assert a == CNPJ("11.222.333/0001-81")
    assert "11.222.333/0001-81" in repr(a)


def test_empresa_enderecos():
    empresa = Empresa(
        nome="Autos da Serra",
        nome_fantasia="AUTO DA SERRA MULTIMARCAS",
        cnpj=CNPJ("29030365000140"),
        endereco=Endereco("Av. Dom Pedro II", "São Cristóvão", "Lages", "SC", "88509-001"),
    )
    assert empresa.endereco_completo == "Av. Dom Pedro II, São Cristóvão - Lages/SC - CEP 88509-001"
    assert empresa.endereco_curto == "Lages - SC"
