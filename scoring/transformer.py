"""
Table → scoring request.

Pure and order preserving: cap the rows, drop the label column, coerce the
numeric columns, keep everything else as text.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from pydantic import ValidationError

from core.errors import TransformFailed
from core.schema import MAX_REQUEST_ROWS, NUMERIC_COLUMNS, RESERVED_COLUMN
from core.utils import leading_int

from .envelopes import CellValue, ScoringRequest


def request_fields(headers: Sequence[str]) -> List[str]:
    return [h for h in headers if h != RESERVED_COLUMN]


def coerce_cell(field: str, value) -> CellValue:
    if field in NUMERIC_COLUMNS:
        return leading_int(value)
    return "" if value is None else value


def to_scoring_request(
    headers: Sequence[str],
    records: Sequence[Mapping[str, str]],
    *,
    max_rows: int = MAX_REQUEST_ROWS,
) -> ScoringRequest:
    """
    Build the request envelope from a header list and keyed records.

    Only the first `max_rows` records are sent; the rest are dropped
    without error. Numeric columns never fail to coerce (bad text → 0).
    """
    fields = request_fields(headers)
    try:
        values = [
            [coerce_cell(f, rec.get(f)) for f in fields]
            for rec in list(records)[:max_rows]
        ]
        return ScoringRequest(fields=fields, values=values)
    except (AttributeError, TypeError, ValidationError) as exc:
        raise TransformFailed(str(exc)) from exc
