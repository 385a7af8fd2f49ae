# revenda/application/dtos/recibo_dto.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from revenda.domain.cliente.value_objects import CPF, NomeCompleto
from revenda.domain.datas import format_date_display, format_date_full_pt_br
from revenda.domain.documento.entities import Recibo
from revenda.domain.documento.value_objects import FormaPagamento, NumeroDocumento, ReferenciaPagamento
from revenda.domain.financeiro.extenso import VALOR_MAXIMO, number_to_words
from revenda.domain.financeiro.value_objects import ValorMonetario
from revenda.domain.formatters import format_currency

from .privacidade import CPF_OCULTO, EXTENSO_OCULTO, NUMERO_OCULTO, VALOR_OCULTO, nome_oculto
from .veiculo_dto import VeiculoIn


class ReciboIn(BaseModel):
    numero: str = Field(..., min_length=1, max_length=40)
    pagador_nome: str = Field(..., min_length=1, max_length=200)
    pagador_cpf: str = Field(..., min_length=1, max_length=20)
    valor: Decimal = Field(..., ge=0, lt=VALOR_MAXIMO)
    forma_pagamento: FormaPagamento
    referencia: ReferenciaPagamento
    data_pagamento: date
    local: str | None = None
    descricao: str | None = None
    veiculo: VeiculoIn | None = None
    vendedor: str | None = None

    def to_domain(self, local_padrao: str) -> Recibo:
        """Raises ValueError (CPF invalido, nome vazio, valor negativo)."""
        return Recibo(
            numero=NumeroDocumento(self.numero),
            pagador_nome=NomeCompleto(self.pagador_nome),
            pagador_cpf=CPF(self.pagador_cpf),
            valor=ValorMonetario(self.valor),
            forma_pagamento=self.forma_pagamento,
            referencia=self.referencia,
            data_pagamento=self.data_pagamento,
            local=self.local or local_padrao,
            descricao=self.descricao,
            veiculo=self.veiculo.to_domain() if self.veiculo else None,
            vendedor=self.vendedor,
        )


class ReciboDTO(BaseModel):
    numero: str
    pagador_nome: str
    pagador_cpf: str
    valor: str
    valor_extenso: str
    forma_pagamento: str
    referencia: str
    data_pagamento: str
    data_extenso: str
    local: str
    descricao: str | None
    veiculo: str | None
    vendedor: str | None
    privacidade: bool = False

    @property
    def texto_corpo(self) -> str:
        """Paragrafo principal: 'Recebi(emos) de ..., a importancia de ...'."""
        referente = self.referencia.lower()
        if self.veiculo:
            referente += f" do veículo {self.veiculo}"
        return (
            f"Recebi(emos) de {self.pagador_nome}, portador(a) do CPF {self.pagador_cpf}, "
            f"a importância de {self.valor} ({self.valor_extenso}), referente a {referente}."
        )

    @classmethod
    def from_domain(cls, recibo: Recibo, *, privacidade: bool = False) -> ReciboDTO:
        veiculo = None
        if recibo.veiculo:
            veiculo = f"{recibo.veiculo.descricao} ano {recibo.veiculo.ano}"
        if privacidade:
            nome = nome_oculto(recibo.pagador_nome.valor)
            cpf = CPF_OCULTO
            valor = VALOR_OCULTO
            extenso = EXTENSO_OCULTO
            numero = NUMERO_OCULTO
        else:
            nome = recibo.pagador_nome.valor
            cpf = recibo.pagador_cpf.formatado
            valor = format_currency(recibo.valor.valor)
            extenso = number_to_words(recibo.valor.valor)
            numero = recibo.numero.valor
        return cls(
            numero=numero,
            pagador_nome=nome,
            pagador_cpf=cpf,
            valor=valor,
            valor_extenso=extenso,
            forma_pagamento=recibo.forma_pagamento.rotulo,
            referencia=recibo.referencia.rotulo,
            data_pagamento=format_date_display(recibo.data_pagamento),
            data_extenso=format_date_full_pt_br(recibo.data_pagamento),
            local=recibo.local,
            descricao=recibo.descricao,
            veiculo=veiculo,
            vendedor=recibo.vendedor,
            privacidade=privacidade,
        )
