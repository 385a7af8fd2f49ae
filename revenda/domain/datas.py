# revenda/domain/datas.py
#
# Date helpers for documents.
#
# Design decisions:
#   - Calendar dates travel as "YYYY-MM-DD" strings or datetime.date objects,
#     never as timestamps, so a payment date never shifts by a timezone offset.
#   - Full ISO timestamps ("2026-01-03T14:00:00Z") are accepted where a date is
#     expected; only the date part is kept.
from __future__ import annotations

import re
from datetime import date, datetime

_MESES = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)
_DATA_ISO = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def current_date_string() -> str:
    return date.today().isoformat()


def to_date_string(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_string(value: str) -> date:
    """'2026-01-03' ou '2026-01-03T10:00:00Z' -> date(2026, 1, 3).

    Raises:
        ValueError: se a parte de data nao for uma data valida.
    """
    return date.fromisoformat(value.split("T", 1)[0])


def is_valid_date_string(value: str) -> bool:
    if not _DATA_ISO.match(value):
        return False
    try:
        parse_date_string(value)
    except ValueError:
        return False
    return True


def _como_date(value: str | date) -> date:
    if isinstance(value, str):
        return parse_date_string(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date_display(value: str | date | None) -> str:
    """DD/MM/YYYY. Entrada vazia resulta em string vazia."""
    if not value:
        return ""
    d = _como_date(value)
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def format_datetime_display(value: str | datetime | None) -> str:
    """DD/MM/YYYY HH:MM"""
    if not value:
        return ""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00")) if isinstance(value, str) else value
    return f"{dt.day:02d}/{dt.month:02d}/{dt.year:04d} {dt.hour:02d}:{dt.minute:02d}"


def format_date_full_pt_br(value: str | date) -> str:
    """Data por extenso para o fecho dos documentos: '03 de janeiro de 2026'."""
    d = _como_date(value)
    return f"{d.day:02d} de {_MESES[d.month - 1]} de {d.year}"
