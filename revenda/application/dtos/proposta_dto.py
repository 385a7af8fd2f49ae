# revenda/application/dtos/proposta_dto.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from revenda.domain.cliente.entities import Cliente
from revenda.domain.cliente.value_objects import CPF, NomeCompleto
from revenda.domain.datas import format_date_display, format_date_full_pt_br
from revenda.domain.documento.entities import Proposta
from revenda.domain.documento.value_objects import NumeroDocumento, TipoProposta
from revenda.domain.financeiro.bancos import obter_banco_por_nome
from revenda.domain.financeiro.value_objects import ValorMonetario
from revenda.domain.formatters import format_currency, format_phone

from .privacidade import CPF_OCULTO, NUMERO_OCULTO, TELEFONE_OCULTO, VALOR_OCULTO, nome_oculto
from .veiculo_dto import VeiculoIn


class ClienteIn(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    cpf: str = Field(..., min_length=1, max_length=20)
    telefone: str | None = None
    email: str | None = None


class PropostaIn(BaseModel):
    numero: str = Field(..., min_length=1, max_length=40)
    cliente: ClienteIn
    veiculo: VeiculoIn
    tipo: TipoProposta
    banco: str | None = None
    valor_veiculo: Decimal = Field(..., ge=0)
    entrada: Decimal = Field(default=Decimal("0"), ge=0)
    valor_financiado: Decimal = Field(default=Decimal("0"), ge=0)
    parcelas: int = Field(default=1, ge=1, le=120)
    valor_parcela: Decimal = Field(default=Decimal("0"), ge=0)
    valor_total: Decimal = Field(..., ge=0)
    data: date
    vendedor: str | None = None
    observacoes: str | None = None

    def to_domain(self) -> Proposta:
        """Raises ValueError (CPF do cliente invalido, proposta bancaria sem banco)."""
        cliente = Cliente(
            nome=NomeCompleto(self.cliente.nome),
            cpf=CPF(self.cliente.cpf),
            telefone=self.cliente.telefone,
            email=self.cliente.email,
        )
        return Proposta(
            numero=NumeroDocumento(self.numero),
            cliente=cliente,
            veiculo=self.veiculo.to_domain(),
            tipo=self.tipo,
            valor_veiculo=ValorMonetario(self.valor_veiculo),
            entrada=ValorMonetario(self.entrada),
            valor_financiado=ValorMonetario(self.valor_financiado),
            parcelas=self.parcelas,
            valor_parcela=ValorMonetario(self.valor_parcela),
            valor_total=ValorMonetario(self.valor_total),
            data=self.data,
            banco=self.banco,
            vendedor=self.vendedor,
            observacoes=self.observacoes,
        )


class PropostaDTO(BaseModel):
    numero: str
    data: str
    data_extenso: str
    vendedor: str | None
    cliente_nome: str
    cliente_cpf: str
    cliente_telefone: str | None
    veiculo: str
    ano: int
    cor: str
    combustivel: str
    cambio: str
    placa: str | None
    banco: str | None
    tipo_financiamento: str | None
    valor_veiculo: str
    entrada: str
    valor_financiado: str
    parcelas: str
    valor_total: str
    observacoes: str | None
    privacidade: bool = False

    @classmethod
    def from_domain(cls, proposta: Proposta, *, privacidade: bool = False) -> PropostaDTO:
        def moeda(valor: ValorMonetario) -> str:
            return VALOR_OCULTO if privacidade else format_currency(valor.valor)

        cliente = proposta.cliente
        telefone = None
        if cliente.telefone:
            telefone = TELEFONE_OCULTO if privacidade else format_phone(cliente.telefone)

        tipo_financiamento = None
        if proposta.banco:
            banco = obter_banco_por_nome(proposta.banco)
            tipo_financiamento = (
                "Financiamento Direto" if banco and banco.is_own else f"Banco: {proposta.banco}"
            )
        elif proposta.tipo is TipoProposta.DIRETO:
            tipo_financiamento = "Financiamento Direto"
        elif proposta.tipo is TipoProposta.AVISTA:
            tipo_financiamento = "À vista"

        return cls(
            numero=NUMERO_OCULTO if privacidade else proposta.numero.valor,
            data=format_date_display(proposta.data),
            data_extenso=format_date_full_pt_br(proposta.data),
            vendedor=proposta.vendedor,
            cliente_nome=nome_oculto(cliente.nome.valor) if privacidade else cliente.nome.valor,
            cliente_cpf=CPF_OCULTO if privacidade else cliente.cpf.formatado,
            cliente_telefone=telefone,
            veiculo=proposta.veiculo.descricao,
            ano=proposta.veiculo.ano,
            cor=proposta.veiculo.cor,
            combustivel=proposta.veiculo.combustivel.rotulo,
            cambio=proposta.veiculo.cambio.rotulo,
            placa=None if privacidade else proposta.veiculo.placa,
            banco=proposta.banco,
            tipo_financiamento=tipo_financiamento,
            valor_veiculo=moeda(proposta.valor_veiculo),
            entrada=moeda(proposta.entrada),
            valor_financiado=moeda(proposta.valor_financiado),
            parcelas=f"{proposta.parcelas}x de {moeda(proposta.valor_parcela)}",
            valor_total=moeda(proposta.valor_total),
            observacoes=proposta.observacoes,
            privacidade=privacidade,
        )
