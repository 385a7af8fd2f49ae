# revenda/interfaces/api/routes/documento_routes.py
import re
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from revenda.application.dtos.proposta_dto import PropostaIn
from revenda.application.dtos.recibo_dto import ReciboIn
from revenda.application.services.documento_service import DocumentoService
from revenda.infrastructure.config import Settings
from revenda.interfaces.api.dependencies import get_app_settings, get_documento_service

router = APIRouter()

Formato = Literal["json", "html", "pdf"]

_FORA_DO_NOME = re.compile(r"[^A-Za-z0-9_-]")


def _nome_arquivo(prefixo: str, numero: str) -> str:
    return f"{prefixo}-{_FORA_DO_NOME.sub('_', numero)}.pdf"


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/recibos/export")
def exportar_recibo(
    body: ReciboIn,
    formato: Formato = Query(...),
    privacidade: bool = Query(default=False),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> Response:
    try:
        recibo = body.to_domain(local_padrao=settings.documento_local)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    if formato == "pdf":
        try:
            pdf_bytes = service.pdf_recibo(recibo, privacidade=privacidade)
        except RuntimeError as err:
            raise HTTPException(status_code=501, detail=str(err)) from err
        return _pdf_response(pdf_bytes, _nome_arquivo("recibo", recibo.numero.valor))

    dto = service.montar_recibo(recibo, privacidade=privacidade)
    if formato == "json":
        return Response(content=dto.model_dump_json(indent=2), media_type="application/json")
    return Response(content=service.html_recibo(dto), media_type="text/html")


@router.post("/propostas/export")
def exportar_proposta(
    body: PropostaIn,
    formato: Formato = Query(...),
    privacidade: bool = Query(default=False),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> Response:
    try:
        proposta = body.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    if formato == "pdf":
        try:
            pdf_bytes = service.pdf_proposta(proposta, privacidade=privacidade)
        except RuntimeError as err:
            raise HTTPException(status_code=501, detail=str(err)) from err
        return _pdf_response(pdf_bytes, _nome_arquivo("proposta", proposta.numero.valor))

    dto = service.montar_proposta(proposta, privacidade=privacidade)
    if formato == "json":
        return Response(content=dto.model_dump_json(indent=2), media_type="application/json")
    return Response(content=service.html_proposta(dto), media_type="text/html")
