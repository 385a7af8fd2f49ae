# revenda/domain/cliente/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_NAO_DIGITO = re.compile(r"\D")


def clean_cpf(cpf: str) -> str:
    """Remove tudo que nao for digito: '111.444.777-35' -> '11144477735'."""
    return _NAO_DIGITO.sub("", cpf)


def format_cpf(cpf: str) -> str:
    """XXX.XXX.XXX-XX. Entradas que nao tem 11 digitos voltam apenas limpas."""
    d = clean_cpf(cpf)
    if len(d) != 11:
        return d
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


def mask_cpf(cpf: str) -> str:
    """***.XXX.XXX-** quando ha 11 digitos; string vazia caso contrario."""
    d = clean_cpf(cpf)
    if len(d) != 11:
        return ""
    return f"***.{d[3:6]}.{d[6:9]}-**"


def _digito(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(c) * (peso_inicial - i) for i, c in enumerate(digitos))
    d = 11 - (soma % 11)
    return 0 if d > 9 else d


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF (dois digitos, modulo 11)."""
    if _digito(digitos[:9], 10) != int(digitos[9]):
        return False
    return _digito(digitos[:10], 11) == int(digitos[10])


def is_valid_cpf(cpf: str) -> bool:
    """True se *cpf* tem 11 digitos (apos limpeza) e digitos verificadores corretos.

    Nunca levanta excecao: entrada que nao e string, comprimento errado ou
    todos os digitos iguais resultam em False.
    """
    if not isinstance(cpf, str):
        return False
    digitos = clean_cpf(cpf)
    if len(digitos) != 11 or not digitos.isascii():
        return False
    if len(set(digitos)) == 1:
        return False
    return _verificar_cpf(digitos)


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""

    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        if not isinstance(raw, str):
            raise ValueError(f"CPF invalido: esperado texto, recebido {type(raw).__name__}")
        digitos = clean_cpf(raw)
        if len(digitos) != 11:
            raise ValueError(f"CPF invalido: comprimento {len(digitos)}, esperado 11")
        if len(set(digitos)) == 1:
            raise ValueError("CPF invalido: todos digitos iguais")
        if not is_valid_cpf(digitos):
            raise ValueError("CPF invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XXX.XXX.XXX-XX, usado nos documentos impressos."""
        return format_cpf(self._valor)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** (formato seguro para logs)."""
        return mask_cpf(self._valor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


class EstadoCivil(Enum):
    SOLTEIRO = "solteiro"
    CASADO = "casado"
    DIVORCIADO = "divorciado"
    VIUVO = "viuvo"
    UNIAO_ESTAVEL = "uniao_estavel"


@dataclass(frozen=True)
class NomeCompleto:
    """Nome nao-vazio, trimado."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Nome nao pode ser vazio")
        object.__setattr__(self, "valor", stripped)

    @property
    def primeiro_nome(self) -> str:
        return self.valor.split()[0]
