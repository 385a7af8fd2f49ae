# revenda/interfaces/api/routes/simulacao_routes.py
from fastapi import APIRouter, HTTPException

from revenda.application.dtos.simulacao_dto import SimulacaoDTO, SimulacaoIn, SimulacoesDTO
from revenda.domain.financeiro.simulacao import simular_bancos, simular_financiamento_proprio

router = APIRouter()


@router.post("/simulacoes", response_model=SimulacoesDTO)
def simular(body: SimulacaoIn) -> SimulacoesDTO:
    try:
        bancos = simular_bancos(body.valor_veiculo, body.entrada, body.parcelas)
        proprio = simular_financiamento_proprio(body.valor_veiculo, body.entrada, body.parcelas_proprio)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return SimulacoesDTO(
        bancos=[SimulacaoDTO.from_domain(s) for s in bancos],
        proprio=SimulacaoDTO.from_domain(proprio),
    )
