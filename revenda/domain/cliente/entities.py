# revenda/domain/cliente/entities.py
from __future__ import annotations

from dataclasses import dataclass

from .value_objects import CPF, EstadoCivil, NomeCompleto


@dataclass(frozen=True)
class Cliente:
    nome: NomeCompleto
    cpf: CPF
    telefone: str | None = None
    email: str | None = None
    rg: str | None = None
    estado_civil: EstadoCivil = EstadoCivil.SOLTEIRO
