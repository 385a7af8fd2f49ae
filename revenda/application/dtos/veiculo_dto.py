# revenda/application/dtos/veiculo_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from revenda.domain.documento.entities import Veiculo
from revenda.domain.documento.value_objects import Cambio, Combustivel


class VeiculoIn(BaseModel):
    marca: str = Field(..., min_length=1)
    modelo: str = Field(..., min_length=1)
    ano: int = Field(..., ge=1900, le=2100)
    cor: str
    combustivel: Combustivel = Combustivel.FLEX
    cambio: Cambio = Cambio.MANUAL
    placa: str | None = None
    quilometragem: int | None = Field(default=None, ge=0)

    def to_domain(self) -> Veiculo:
        return Veiculo(
            marca=self.marca,
            modelo=self.modelo,
            ano=self.ano,
            cor=self.cor,
            combustivel=self.combustivel,
            cambio=self.cambio,
            placa=self.placa,
            quilometragem=self.quilometragem,
        )
