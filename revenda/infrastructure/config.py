# revenda/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings. Empty strings mean "use the built-in dealership default"."""

    empresa_nome: str = ""
    empresa_nome_fantasia: str = ""
    empresa_cnpj: str = ""
    empresa_telefone: str = ""
    empresa_email: str = ""
    representante_nome: str = ""
    representante_rg: str = ""
    representante_cpf: str = ""
    documento_local: str = "Lages - SC"
    cors_origins: tuple[str, ...] = ("http://localhost:5173",)
    debug: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins_raw = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        empresa_nome=os.environ.get("EMPRESA_NOME", ""),
        empresa_nome_fantasia=os.environ.get("EMPRESA_NOME_FANTASIA", ""),
        empresa_cnpj=os.environ.get("EMPRESA_CNPJ", ""),
        empresa_telefone=os.environ.get("EMPRESA_TELEFONE", ""),
        empresa_email=os.environ.get("EMPRESA_EMAIL", ""),
        representante_nome=os.environ.get("EMPRESA_REPRESENTANTE_NOME", ""),
        representante_rg=os.environ.get("EMPRESA_REPRESENTANTE_RG", ""),
        representante_cpf=os.environ.get("EMPRESA_REPRESENTANTE_CPF", ""),
        documento_local=os.environ.get("DOCUMENTO_LOCAL", "Lages - SC"),
        cors_origins=tuple(o.strip() for o in origins_raw.split(",") if o.strip()),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
