"""
Read-only view over a scoring response for display.

Accepts both response shapes seen from the backends:
    {"engine", "ok", "result": {"predictions": [...]}}   (watsonx-style)
    {"engine", "ok", "model", "predictions": [...]}      (GPT-style)
Every accessor is total: malformed or missing data yields a sentinel.
"""

from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

from core.schema import (
    RISK_CSS_CLASSES,
    UNKNOWN_CSS_CLASS,
    UNKNOWN_LABEL,
    ZERO_PERCENT_TEXT,
)
from core.utils import format_percent, is_probability


def label_css_class(label: Any) -> str:
    if not isinstance(label, str):
        return UNKNOWN_CSS_CLASS
    return RISK_CSS_CLASSES.get(label, UNKNOWN_CSS_CLASS)


class ResultNormalizer:

    def __init__(self, response: Optional[Any]):
        self.response = response

    def _predictions(self) -> Any:
        resp = self.response
        if not isinstance(resp, dict):
            return None
        result = resp.get("result")
        if isinstance(result, dict) and "predictions" in result:
            return result["predictions"]
        return resp.get("predictions")

    # ------------------------------------------------------------------
    # Envelope metadata
    # ------------------------------------------------------------------
    @property
    def engine(self) -> str:
        if isinstance(self.response, dict) and isinstance(self.response.get("engine"), str):
            return self.response["engine"]
        return ""

    @property
    def ok(self) -> bool:
        return isinstance(self.response, dict) and self.response.get("ok") is True

    @property
    def model(self) -> Optional[str]:
        if isinstance(self.response, dict) and isinstance(self.response.get("model"), str):
            return self.response["model"]
        return None

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    def results(self) -> List[Any]:
        """`predictions[0].values`, or [] when any level is absent."""
        preds = self._predictions()
        if not isinstance(preds, list) or len(preds) == 0 or not isinstance(preds[0], dict):
            return []
        values = preds[0].get("values")
        if not isinstance(values, list):
            return []
        return values

    def record_count(self) -> int:
        return len(self.results())

    def _row(self, record_index: int) -> Optional[list]:
        results = self.results()
        if not isinstance(record_index, int) or not 0 <= record_index < len(results):
            return None
        row = results[record_index]
        return row if isinstance(row, list) else None

    def _probability(self, record_index: int, prob_index: int) -> Optional[float]:
        row = self._row(record_index)
        if row is None or len(row) < 2 or not isinstance(row[1], list):
            return None
        probs = row[1]
        if not isinstance(prob_index, int) or not 0 <= prob_index < len(probs):
            return None
        prob = probs[prob_index]
        return float(prob) if is_probability(prob) else None

    def prediction_label(self, record_index: int = 0) -> str:
        row = self._row(record_index)
        if row is None or len(row) == 0:
            return UNKNOWN_LABEL
        label = row[0]
        if isinstance(label, str) and label:
            return label
        return UNKNOWN_LABEL

    def probability_text(self, record_index: int = 0, prob_index: int = 0) -> str:
        prob = self._probability(record_index, prob_index)
        return ZERO_PERCENT_TEXT if prob is None else format_percent(prob)

    def probability_percent(self, record_index: int = 0, prob_index: int = 0) -> float:
        prob = self._probability(record_index, prob_index)
        return 0 if prob is None else prob * 100

    label_css_class = staticmethod(label_css_class)

    def to_frame(self, prob_index: int = 0) -> pd.DataFrame:
        """One display row per scored record."""
        rows = []
        for i in range(self.record_count()):
            label = self.prediction_label(i)
            rows.append({
                "Record": i + 1,
                "Prediction": label,
                "Probability": self.probability_text(i, prob_index),
                "Probability %": self.probability_percent(i, prob_index),
                "Class": label_css_class(label),
            })
        return pd.DataFrame(rows, columns=["Record", "Prediction", "Probability", "Probability %", "Class"])
