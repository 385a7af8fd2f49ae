import random

import pytest

from revenda.domain.cliente.value_objects import CPF, NomeCompleto, clean_cpf, format_cpf, is_valid_cpf, mask_cpf


def _cpf_com_digitos(base: str) -> str:
    """Completa 9 digitos com os dois verificadores (calculo independente do modulo)."""
    soma = sum(int(base[i]) * (10 - i) for i in range(9))
    d1 = 11 - soma % 11
    d1 = 0 if d1 > 9 else d1
    parcial = base + str(d1)
    soma = sum(int(parcial[i]) * (11 - i) for i in range(10))
    d2 = 11 - soma % 11
    d2 = 0 if d2 > 9 else d2
    return parcial + str(d2)


def test_cpf_conhecido_valido():
    assert is_valid_cpf("11144477735") is True
    assert is_valid_cpf("52998224725") is True


def test_cpf_com_pontuacao_valido():
    assert is_valid_cpf("111.444.777-35") is True
    assert is_valid_cpf(" 111 444 777 35 ") is True


def test_cpf_todos_iguais_invalido():
    assert is_valid_cpf("11111111111") is False
    assert is_valid_cpf("000.000.000-00") is False


def test_cpf_comprimento_errado_invalido():
    assert is_valid_cpf("123") is False
    assert is_valid_cpf("") is False
    assert is_valid_cpf("111444777350") is False


def test_cpf_digito_verificador_errado():
    assert is_valid_cpf("111.444.777-00") is False
    assert is_valid_cpf("11144477736") is False


def test_cpf_entrada_nao_string_nunca_levanta():
    assert is_valid_cpf(None) is False  # type: ignore[arg-type]
    assert is_valid_cpf(11144477735) is False  # type: ignore[arg-type]


def test_cpf_gerado_valido_e_mutacao_de_verificador_invalida():
    rng = random.Random(20260103)
    for _ in range(200):
        base = "".join(rng.choice("0123456789") for _ in range(9))
        if len(set(base)) == 1:
            continue
        cpf = _cpf_com_digitos(base)
        assert is_valid_cpf(cpf), cpf

        for pos in (9, 10):
            outro = rng.choice([d for d in "0123456789" if d != cpf[pos]])
            assert not is_valid_cpf(cpf[:pos] + outro + cpf[pos + 1:])


def test_cpf_mutacao_de_um_digito_invalida_com_alta_probabilidade():
    rng = random.Random(42)
    mutacoes = 0
    invalidas = 0
    for _ in range(300):
        base = "".join(rng.choice("0123456789") for _ in range(9))
        if len(set(base)) == 1:
            continue
        cpf = _cpf_com_digitos(base)
        pos = rng.randrange(9)
        outro = rng.choice([d for d in "0123456789" if d != cpf[pos]])
        mutacoes += 1
        invalidas += not is_valid_cpf(cpf[:pos] + outro + cpf[pos + 1:])
    assert invalidas / mutacoes > 0.9


def test_clean_e_format_cpf():
    assert clean_cpf("111.444.777-35") == "11144477735"
    assert format_cpf("11144477735") == "111.444.777-35"
    assert format_cpf("123") == "123"


def test_mask_cpf():
    assert mask_cpf("111.444.777-35") == "***.444.777-**"
    assert mask_cpf("123") == ""


def test_cpf_vo_valido_formatado():
    cpf = CPF("111.444.777-35")
    assert cpf.valor == "11144477735"
    assert cpf.formatado == "111.444.777-35"


def test_cpf_vo_digito_verificador_invalido():
    with pytest.raises(ValueError, match="CPF invalido"):
        CPF("111.444.777-00")


def test_cpf_vo_todos_iguais_invalido():
    with pytest.raises(ValueError, match="todos digitos iguais"):
        CPF("111.111.111-11")


def test_cpf_vo_comprimento_errado():
    with pytest.raises(ValueError, match="comprimento 3"):
        CPF("123")


def test_cpf_repr_nunca_mostra_completo():
    """CPF nunca aparece completo em logs/repr (LGPD)."""
    cpf = CPF("11144477735")
    assert "11144477735" not in repr(cpf)
    assert "11144477735" not in str(cpf)
    assert "***" in repr(cpf)


def test_cpf_igualdade_por_valor():
    a = CPF("11144477735")
    b = CPF("111.444.777-35")
    assert a == b
    assert hash(a) == hash(b)


def test_nome_completo_trimado_e_primeiro_nome():
    nome = NomeCompleto("  Maria da Silva ")
    assert nome.valor == "Maria da Silva"
    assert nome.primeiro_nome == "Maria"


def test_nome_vazio_invalido():
    with pytest.raises(ValueError, match="vazio"):
        NomeCompleto("   ")


@pytest.mark.parametrize("raw", [None, 11144477735, b"11144477735"])
def test_cpf_vo_entrada_nao_string_levanta_value_error(raw):
    with pytest.raises(ValueError, match="CPF invalido: esperado texto"):
        CPF(raw)
