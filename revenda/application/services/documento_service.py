# revenda/application/services/documento_service.py
from __future__ import annotations

from revenda.domain.documento.entities import Proposta, Recibo
from revenda.domain.empresa.entities import Empresa
from revenda.domain.financeiro.bancos import cores_pdf
from revenda.infrastructure import pdf_generator
from revenda.infrastructure.log import log_documento

from ..dtos.proposta_dto import PropostaDTO
from ..dtos.recibo_dto import ReciboDTO


class DocumentoService:
    """Monta recibos e propostas para impressao (JSON, HTML ou PDF)."""

    def __init__(self, empresa: Empresa) -> None:
        self._empresa = empresa

    def montar_recibo(self, recibo: Recibo, *, privacidade: bool = False) -> ReciboDTO:
        return ReciboDTO.from_domain(recibo, privacidade=privacidade)

    def montar_proposta(self, proposta: Proposta, *, privacidade: bool = False) -> PropostaDTO:
        return PropostaDTO.from_domain(proposta, privacidade=privacidade)

    def html_recibo(self, dto: ReciboDTO) -> str:
        # Receipts always carry the dealership colours.
        return pdf_generator.build_html_recibo(dto, self._empresa, cores_pdf())

    def html_proposta(self, dto: PropostaDTO) -> str:
        return pdf_generator.build_html_proposta(dto, self._empresa, cores_pdf(dto.banco))

    def pdf_recibo(self, recibo: Recibo, *, privacidade: bool = False) -> bytes:
        """Raises RuntimeError if PDF support is not installed."""
        dto = self.montar_recibo(recibo, privacidade=privacidade)
        pdf = pdf_generator.gerar_pdf_recibo(dto, self._empresa, cores_pdf())
        log_documento("Recibo", recibo.numero.valor, len(pdf), cpf=recibo.pagador_cpf)
        return pdf

    def pdf_proposta(self, proposta: Proposta, *, privacidade: bool = False) -> bytes:
        """Raises RuntimeError if PDF support is not installed."""
        dto = self.montar_proposta(proposta, privacidade=privacidade)
        pdf = pdf_generator.gerar_pdf_proposta(dto, self._empresa, cores_pdf(proposta.banco))
        log_documento(
            "Proposta", proposta.numero.valor, len(pdf),
            cpf=proposta.cliente.cpf, detalhe=f"banco {proposta.banco or '-'}",
        )
        return pdf
