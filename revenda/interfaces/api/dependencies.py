# revenda/interfaces/api/dependencies.py
from revenda.application.services.documento_service import DocumentoService
from revenda.infrastructure.config import Settings, get_settings
from revenda.infrastructure.empresa import obter_empresa


def get_documento_service() -> DocumentoService:
    return DocumentoService(empresa=obter_empresa())


def get_app_settings() -> Settings:
    return get_settings()
