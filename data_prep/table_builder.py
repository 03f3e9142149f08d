"""
Turn a parsed RawTable into a header plus keyed records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from core.errors import EmptyOrUnparseableTable
from core.schema import MAX_REQUEST_ROWS, RESERVED_COLUMN

Record = Dict[str, str]


@dataclass(frozen=True)
class CsvTable:
    """Header row + one record per data row, for a single file selection."""
    headers: Tuple[str, ...]
    records: Tuple[Record, ...]
    raw_row_lengths: Tuple[int, ...] = ()

    @property
    def total_rows(self) -> int:
        return len(self.records)

    @property
    def analyzed_rows(self) -> int:
        return min(self.total_rows, MAX_REQUEST_ROWS)

    @property
    def has_reserved_column(self) -> bool:
        return RESERVED_COLUMN in self.headers

    def column(self, name: str) -> List[str]:
        return [r.get(name, "") for r in self.records]


def rows_to_records(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[Record]:
    """
    Key each row by header name. Short rows are padded with "" and extra
    fields are ignored. With duplicate header names the first position wins.
    """
    records: List[Record] = []
    for row in rows:
        rec: Record = {}
        for j, name in enumerate(headers):
            if name in rec:
                continue
            rec[name] = row[j] if j < len(row) else ""
        records.append(rec)
    return records


def build_table(raw: Sequence[Sequence[str]]) -> CsvTable:
    """Row 0 is the header. Raises EmptyOrUnparseableTable when there is no row at all."""
    if len(raw) == 0:
        raise EmptyOrUnparseableTable("CSV has no rows (no header).")

    headers = tuple(raw[0])
    body = raw[1:]
    return CsvTable(
        headers=headers,
        records=tuple(rows_to_records(headers, body)),
        raw_row_lengths=tuple(len(r) for r in body),
    )
