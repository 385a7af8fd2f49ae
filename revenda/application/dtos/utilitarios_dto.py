# revenda/application/dtos/utilitarios_dto.py
from pydantic import BaseModel


class ExtensoDTO(BaseModel):
    valor: str
    extenso: str


class CPFValidacaoDTO(BaseModel):
    cpf: str
    valido: bool
