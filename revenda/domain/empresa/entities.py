# revenda/domain/empresa/entities.py
from __future__ import annotations

from dataclasses import dataclass

from .value_objects import CNPJ, Endereco, RepresentanteLegal


@dataclass(frozen=True)
class Empresa:
    """Dados fixos da revenda impressos em todo documento."""

    nome: str
    nome_fantasia: str
    cnpj: CNPJ
    endereco: Endereco
    telefone: str | None = None
    email: str | None = None
    representante_legal: RepresentanteLegal | None = None

    @property
    def endereco_completo(self) -> str:
        e = self.endereco
        return f"{e.logradouro}, {e.bairro} - {e.municipio}/{e.uf} - CEP {e.cep}"

    @property
    def endereco_curto(self) -> str:
        return f"{self.endereco.municipio} - {self.endereco.uf}"
