# revenda/application/dtos/privacidade.py
#
# Privacy mode: the dealer can print a document in front of other customers
# without exposing who paid, how much, or under which CPF.
from __future__ import annotations

VALOR_OCULTO = "R$ *****,**"
CPF_OCULTO = "***.***.***-**"
TELEFONE_OCULTO = "(**) *****-****"
NUMERO_OCULTO = "****"
EXTENSO_OCULTO = "(valor oculto)"


def nome_oculto(nome: str) -> str:
    """'Maria da Silva' -> 'Maria ***'"""
    return nome.split()[0] + " ***"
