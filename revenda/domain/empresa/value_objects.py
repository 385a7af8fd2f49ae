# revenda/domain/empresa/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

_NAO_DIGITO = re.compile(r"\D")

_PESOS_D1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_D2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def clean_cnpj(cnpj: str) -> str:
    """'29.030.365/0001-40' -> '29030365000140'"""
    return _NAO_DIGITO.sub("", cnpj)


def format_cnpj(cnpj: str) -> str:
    """XX.XXX.XXX/XXXX-XX. Entradas sem 14 digitos voltam apenas limpas."""
    d = clean_cnpj(cnpj)
    if len(d) != 14:
        return d
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


def _digito_cnpj(digitos: str, pesos: tuple[int, ...]) -> int:
    resto = sum(int(c) * p for c, p in zip(digitos, pesos)) % 11
    return 0 if resto < 2 else 11 - resto


def _motivo_invalido(cnpj: object) -> str | None:
    if not isinstance(cnpj, str):
        return f"esperado texto, recebido {type(cnpj).__name__}"
    digitos = clean_cnpj(cnpj)
    if len(digitos) != 14:
        return f"comprimento {len(digitos)}, esperado 14"
    if not digitos.isascii():
        return "digitos fora do padrao ASCII"
    if len(set(digitos)) == 1:
        return "todos digitos iguais"
    if _digito_cnpj(digitos[:12], _PESOS_D1) != int(digitos[12]):
        return "digitos verificadores incorretos"
    if _digito_cnpj(digitos[:13], _PESOS_D2) != int(digitos[13]):
        return "digitos verificadores incorretos"
    return None


def is_valid_cnpj(cnpj: str) -> bool:
    """Mesmas regras do CPF: nunca levanta, entrada que nao e string vira False."""
    return _motivo_invalido(cnpj) is None


@dataclass(frozen=True)
class CNPJ:
    """CNPJ da revenda, impresso no cabecalho e no rodape dos documentos."""

    valor: str  # 14 digitos apos __post_init__

    def __post_init__(self) -> None:
        motivo = _motivo_invalido(self.valor)
        if motivo:
            raise ValueError(f"CNPJ invalido: {motivo}")
        object.__setattr__(self, "valor", clean_cnpj(self.valor))

    @property
    def formatado(self) -> str:
        return format_cnpj(self.valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class Endereco:
    logradouro: str
    bairro: str
    municipio: str
    uf: str
    cep: str


@dataclass(frozen=True)
class RepresentanteLegal:
    nome: str
    nacionalidade: str
    estado_civil: str
    profissao: str
    rg: str
    cpf: str
