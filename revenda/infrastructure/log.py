# revenda/infrastructure/log.py
#
# Log de exportacao de documentos: stdout, tempo decorrido desde o import.
# CPF entra como value object e sai sempre mascarado.
from __future__ import annotations

import sys
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from revenda.domain.cliente.value_objects import CPF

_start = time.monotonic()


def _prefixo() -> str:
    minutos, segundos = divmod(int(time.monotonic() - _start), 60)
    return f"[revenda {minutos:02d}:{segundos:02d}]"


def log(message: str, *, cpf: CPF | None = None) -> None:
    """Write a timestamped line to stdout, suffixed with the masked CPF if given."""
    if cpf is not None:
        message = f"{message}, CPF {cpf.mascarado}"
    sys.stdout.write(f"{_prefixo()} {message}\n")
    sys.stdout.flush()


def log_documento(tipo: str, numero: str, tamanho: int, *, cpf: CPF, detalhe: str | None = None) -> None:
    """'PDF recibo REC2026010001 (12,345 bytes), CPF ***.444.777-**'"""
    texto = f"PDF {tipo.lower()} {numero} ({tamanho:,} bytes)"
    if detalhe:
        texto = f"{texto}, {detalhe}"
    log(texto, cpf=cpf)
