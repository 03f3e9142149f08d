"""
Request/response envelopes exchanged with the risk scoring API.

Wire request:
    {"input_data": [{"fields": [...], "values": [[...], ...]}]}

Responses stay plain dicts (ScoringResponse): the backends disagree on
shape, so ResultNormalizer reads them defensively instead of validating.
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

CellValue = Union[StrictInt, StrictStr]
ScoringResponse = Dict[str, Any]


class ScoringRequest(BaseModel):
    """One batch of rows for the scorer; `values[i][j]` matches `fields[j]`."""

    model_config = ConfigDict(frozen=True)

    fields: List[str]
    values: List[List[CellValue]]

    @property
    def row_count(self) -> int:
        return len(self.values)

    def to_wire(self) -> Dict[str, Any]:
        return {"input_data": [self.model_dump()]}

    def to_json(self) -> str:
        return '{"input_data":[' + self.model_dump_json() + "]}"

    @classmethod
    def from_wire(cls, payload: Dict[str, Any]) -> "ScoringRequest":
        return cls.model_validate(payload["input_data"][0])
