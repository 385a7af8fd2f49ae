from decimal import Decimal

from revenda.domain.formatters import clean_phone, format_currency, format_mileage, format_percent, format_phone


def test_format_currency_milhar_e_centavos():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(Decimal("1000000")) == "R$ 1.000.000,00"
    assert format_currency(0) == "R$ 0,00"


def test_format_currency_negativo_e_arredondamento():
    assert format_currency(-1) == "-R$ 1,00"
    assert format_currency(0.005) == "R$ 0,01"


def test_format_phone_celular_e_fixo():
    assert format_phone("49999998888") == "(49) 99999-8888"
    assert format_phone("(49) 3222-1111") == "(49) 3222-1111"
    assert format_phone("4932221111") == "(49) 3222-1111"


def test_format_phone_comprimento_desconhecido_retorna_digitos():
    assert format_phone("12-3") == "123"
    assert clean_phone("(49) 9 9999-8888") == "49999998888"


def test_format_mileage():
    assert format_mileage(45000) == "45.000 km"
    assert format_mileage(0) == "0 km"


def test_format_percent():
    assert format_percent(1.89) == "1,89%"
    assert format_percent(2) == "2,00%"
