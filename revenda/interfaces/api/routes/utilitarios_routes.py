# revenda/interfaces/api/routes/utilitarios_routes.py
from decimal import Decimal

from fastapi import APIRouter, Path, Query

from revenda.application.dtos.utilitarios_dto import CPFValidacaoDTO, ExtensoDTO
from revenda.domain.cliente.value_objects import is_valid_cpf, mask_cpf
from revenda.domain.financeiro.extenso import VALOR_MAXIMO, number_to_words

router = APIRouter()


@router.get("/extenso", response_model=ExtensoDTO)
def valor_por_extenso(
    valor: Decimal = Query(..., ge=0, lt=VALOR_MAXIMO),
) -> ExtensoDTO:
    return ExtensoDTO(valor=str(valor), extenso=number_to_words(valor))


@router.get("/cpf/{cpf_raw}/validacao", response_model=CPFValidacaoDTO)
def validar_cpf(cpf_raw: str = Path(..., max_length=20)) -> CPFValidacaoDTO:
    # CPF invalido nao e erro de requisicao: a resposta diz valido=false.
    return CPFValidacaoDTO(cpf=mask_cpf(cpf_raw), valido=is_valid_cpf(cpf_raw))
