# revenda/infrastructure/pdf_generator.py
from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from revenda.application.dtos.proposta_dto import PropostaDTO
    from revenda.application.dtos.recibo_dto import ReciboDTO
    from revenda.domain.empresa.entities import Empresa
    from revenda.domain.financeiro.bancos import CoresPDF

TEXTO_LEGAL_RECIBO = (
    "Para maior clareza, firmo(amos) o presente recibo para que produza os seus devidos efeitos legais."
)
TEXTO_LEGAL_PROPOSTA = "Esta proposta tem validade de 5 dias úteis e está sujeita a aprovação de crédito."


def _html_para_pdf(html: str) -> bytes:
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install revenda[pdf]"
        raise RuntimeError(msg) from err
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def gerar_pdf_recibo(recibo: ReciboDTO, empresa: Empresa, cores: CoresPDF) -> bytes:
    """Generate the receipt PDF. Raises RuntimeError if weasyprint is not installed."""
    return _html_para_pdf(build_html_recibo(recibo, empresa, cores))


def gerar_pdf_proposta(proposta: PropostaDTO, empresa: Empresa, cores: CoresPDF) -> bytes:
    """Generate the proposal PDF. Raises RuntimeError if weasyprint is not installed."""
    return _html_para_pdf(build_html_proposta(proposta, empresa, cores))


def _e(value: object) -> str:
    return escape(str(value)) if value is not None else "-"


def _linhas(pares: list[tuple[str, str | None]]) -> str:
    return "".join(f'<tr><td class="label">{escape(k)}</td><td>{_e(v)}</td></tr>' for k, v in pares)


def _cabecalho(empresa: Empresa, cores: CoresPDF, banco: str | None = None) -> str:
    badge = ""
    if banco and not cores.is_own:
        badge = f'<div class="badge">Financiamento: {escape(banco)}</div>'
    faixa = '<div class="faixa"></div>' if cores.is_own else ""
    telefone = f"<div>{escape(empresa.telefone)}</div>" if empresa.telefone else ""
    return f"""
    <div class="header">
        <div class="contato">
            <div>{escape(empresa.endereco_curto)}</div>
            {telefone}
            {badge}
        </div>
        <div class="marca">{escape(empresa.nome_fantasia)}</div>
        <div class="tagline">Multimarcas</div>
        <div class="cnpj">CNPJ: {escape(empresa.cnpj.formatado)}</div>
    </div>
    {faixa}
    """


def _rodape(empresa: Empresa, tipo_documento: str) -> str:
    return f"""
    <div class="footer">
        <div>{escape(empresa.nome_fantasia)} | CNPJ: {escape(empresa.cnpj.formatado)}</div>
        <div>{escape(empresa.endereco_completo)}</div>
        <div>Documento gerado eletronicamente - {escape(tipo_documento)}</div>
    </div>
    """


def _assinaturas(esquerda: tuple[str, str | None], direita: tuple[str, str | None]) -> str:
    blocos = "".join(
        '<div class="assinatura"><div class="linha"></div>'
        f'<div>{escape(rotulo)}</div><div class="nome">{escape(nome or "")}</div></div>'
        for rotulo, nome in (esquerda, direita)
    )
    return f'<div class="assinaturas">{blocos}</div>'


def build_html_recibo(recibo: ReciboDTO, empresa: Empresa, cores: CoresPDF) -> str:
    sections: list[str] = [_cabecalho(empresa, cores)]

    sections.append(f"""
    <h1 class="titulo titulo-secundario">RECIBO DE PAGAMENTO</h1>
    <div class="meta"><span>Nº {escape(recibo.numero)}</span><span>Data: {escape(recibo.data_pagamento)}</span></div>
    <div class="referencia">{escape(recibo.referencia)}</div>
    <div class="valor">
        <div class="valor-rotulo">Valor recebido:</div>
        <div class="valor-numero">{escape(recibo.valor)}</div>
        <div class="valor-extenso">({escape(recibo.valor_extenso)})</div>
    </div>
    <p class="corpo">{escape(recibo.texto_corpo)}</p>
    """)

    detalhes = [
        ("Forma de Pagamento", recibo.forma_pagamento),
        ("Data do Pagamento", recibo.data_pagamento),
        ("Local", recibo.local),
    ]
    if recibo.vendedor:
        detalhes.append(("Atendido por", recibo.vendedor))
    sections.append(f"<h2>DETALHES DO PAGAMENTO</h2><table>{_linhas(detalhes)}</table>")

    if recibo.descricao:
        sections.append(f'<h3>Observações:</h3><p>{escape(recibo.descricao)}</p>')

    sections.append(_assinaturas(
        ("Assinatura do Pagador", recibo.pagador_nome),
        ("Assinatura do Recebedor", recibo.vendedor),
    ))
    sections.append(f"""
    <p class="legal">{escape(TEXTO_LEGAL_RECIBO)}</p>
    <p class="legal">{escape(recibo.local)}, {escape(recibo.data_extenso)}</p>
    """)
    sections.append(_rodape(empresa, "Recibo de Pagamento"))

    return _documento(f"Recibo {recibo.numero}", "\n".join(sections), cores)


def build_html_proposta(proposta: PropostaDTO, empresa: Empresa, cores: CoresPDF) -> str:
    sections: list[str] = [_cabecalho(empresa, cores, proposta.banco)]

    titulo_cls = "titulo-secundario" if cores.is_own else "titulo-primario"
    vendedor = f"<div>Vendedor: {escape(proposta.vendedor)}</div>" if proposta.vendedor else ""
    sections.append(f"""
    <h1 class="titulo {titulo_cls}">PROPOSTA DE VENDA</h1>
    <div class="meta"><span>Proposta Nº {escape(proposta.numero)}</span><span>Data: {escape(proposta.data)}</span></div>
    {vendedor}
    """)

    cliente = [("Nome", proposta.cliente_nome), ("CPF", proposta.cliente_cpf)]
    if proposta.cliente_telefone:
        cliente.append(("Telefone", proposta.cliente_telefone))
    sections.append(f"<h2>DADOS DO CLIENTE</h2><table>{_linhas(cliente)}</table>")

    veiculo = [
        ("Veículo", proposta.veiculo),
        ("Ano", str(proposta.ano)),
        ("Cor", proposta.cor),
        ("Combustível", proposta.combustivel),
        ("Câmbio", proposta.cambio),
    ]
    if proposta.placa:
        veiculo.append(("Placa", proposta.placa))
    sections.append(f"<h2>DADOS DO VEÍCULO</h2><table>{_linhas(veiculo)}</table>")

    pagamento = [
        ("Valor do Veículo", proposta.valor_veiculo),
        ("Entrada", proposta.entrada),
        ("Valor Financiado", proposta.valor_financiado),
        ("Parcelas", proposta.parcelas),
    ]
    if proposta.tipo_financiamento:
        pagamento.append(("Tipo", proposta.tipo_financiamento))
    sections.append(f"""
    <h2>CONDIÇÕES DE PAGAMENTO</h2>
    <table>{_linhas(pagamento)}</table>
    <div class="total">Total: {escape(proposta.valor_total)}</div>
    """)

    if proposta.observacoes:
        sections.append(f'<h3>Observações:</h3><p>{escape(proposta.observacoes)}</p>')

    sections.append(_assinaturas(
        ("Assinatura do Cliente", proposta.cliente_nome),
        ("Assinatura do Vendedor", proposta.vendedor),
    ))
    sections.append(f"""
    <p class="legal">{escape(TEXTO_LEGAL_PROPOSTA)}</p>
    <p class="legal">{escape(empresa.endereco_curto)}, {escape(proposta.data_extenso)}</p>
    """)
    sections.append(_rodape(empresa, "Proposta de Venda"))

    return _documento(f"Proposta {proposta.numero}", "\n".join(sections), cores)


def _documento(titulo: str, body: str, cores: CoresPDF) -> str:
    primaria = cores.primaria_hex
    secundaria = cores.secundaria_hex
    texto = cores.texto_hex
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{escape(titulo)}</title>
<style>
    @page {{ size: A4; margin: 15mm 15mm 30mm 15mm; }}
    body {{ font-family: Helvetica, Arial, sans-serif; font-size: 11px; color: #1e1e1e; }}
    .header {{ background-color: {primaria}; color: {texto}; padding: 12px 20px; }}
    .header .marca {{ font-size: 24px; font-weight: bold; }}
    .header .tagline {{ font-size: 10px; }}
    .header .cnpj {{ font-size: 8px; margin-top: 4px; }}
    .header .contato {{ float: right; text-align: right; font-size: 9px; }}
    .badge {{ background-color: #ffffff; color: {primaria}; border-radius: 4px; padding: 2px 8px; margin-top: 4px; font-size: 8px; }}
    .faixa {{ background-color: {secundaria}; height: 4px; }}
    .titulo {{ font-size: 16px; text-align: center; padding: 8px; margin: 16px 0 8px; }}
    .titulo-secundario {{ background-color: {secundaria}; color: #1e1e1e; }}
    .titulo-primario {{ background-color: {primaria}; color: {texto}; }}
    .meta {{ display: flex; justify-content: space-between; color: #505050; font-size: 10px; }}
    .referencia {{ display: inline-block; background-color: {primaria}; color: {texto}; font-weight: bold; border-radius: 4px; padding: 2px 12px; margin: 12px 0; }}
    .valor {{ background-color: #f5f5f5; border: 1px solid {primaria}; padding: 10px 20px; }}
    .valor-numero {{ font-size: 22px; font-weight: bold; }}
    .valor-extenso {{ font-style: italic; color: #505050; }}
    h2 {{ background-color: {primaria}; color: #ffffff; font-size: 10px; padding: 4px 8px; margin-top: 18px; }}
    h3 {{ font-size: 9px; color: #505050; }}
    table {{ width: 100%; border-collapse: collapse; background-color: #fafafa; }}
    td {{ padding: 4px 8px; }}
    .label {{ color: #646464; width: 180px; }}
    .total {{ background-color: {primaria}; color: #ffffff; font-weight: bold; border-radius: 4px; padding: 6px; margin-top: 8px; text-align: center; width: 45%; margin-left: auto; }}
    .assinaturas {{ display: flex; justify-content: space-between; margin-top: 60px; }}
    .assinatura {{ width: 40%; text-align: center; color: #505050; font-size: 9px; }}
    .assinatura .linha {{ border-top: 1px solid #646464; margin-bottom: 4px; }}
    .assinatura .nome {{ font-size: 8px; }}
    .legal {{ text-align: center; font-style: italic; color: #646464; font-size: 8px; }}
    .footer {{ border-top: 1px solid #c8c8c8; margin-top: 24px; padding-top: 6px; text-align: center; color: #808080; font-size: 7px; }}
</style>
</head>
<body>
{body}
</body>
</html>"""
