# revenda/infrastructure/empresa.py
#
# Dealership identity used in document headers and footers.
#
# Design decisions:
#   - Built-in defaults describe the single dealership this tool serves.
#   - Each identity field can be overridden through an EMPRESA_* environment
#     variable (see config.Settings); an empty override keeps the default.
#   - The legal representative is personal data and has no default: it only
#     exists when EMPRESA_REPRESENTANTE_NOME is set.
#   - The CNPJ passes through the CNPJ value object, so a bad override fails
#     at startup instead of being printed on every receipt.
from __future__ import annotations

from revenda.domain.empresa.entities import Empresa
from revenda.domain.empresa.value_objects import CNPJ, Endereco, RepresentanteLegal
from revenda.infrastructure.config import Settings, get_settings

_ENDERECO_PADRAO = Endereco(
    logradouro="Av. Dom Pedro II",
    bairro="São Cristóvão",
    municipio="Lages",
    uf="SC",
    cep="88509-001",
)


def _representante(s: Settings) -> RepresentanteLegal | None:
    if not s.representante_nome:
        return None
    return RepresentanteLegal(
        nome=s.representante_nome,
        nacionalidade="Brasileiro",
        estado_civil="solteiro(a)",
        profissao="Empresário",
        rg=s.representante_rg,
        cpf=s.representante_cpf,
    )


def obter_empresa(settings: Settings | None = None) -> Empresa:
    """Merge built-in dealership defaults with environment overrides."""
    s = settings or get_settings()
    return Empresa(
        nome=s.empresa_nome or "Autos da Serra",
        nome_fantasia=s.empresa_nome_fantasia or "AUTO DA SERRA MULTIMARCAS",
        cnpj=CNPJ(s.empresa_cnpj or "29.030.365/0001-40"),
        endereco=_ENDERECO_PADRAO,
        telefone=s.empresa_telefone or "(49) 9999-9999",
        email=s.empresa_email or None,
        representante_legal=_representante(s),
    )
