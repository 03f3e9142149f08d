from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# Columns the scoring model expects as integers. Everything else is sent as text.
NUMERIC_COLUMNS: FrozenSet[str] = frozenset({
    "LoanDuration",
    "LoanAmount",
    "InstallmentPercent",
    "CurrentResidenceDuration",
    "Age",
    "ExistingCreditsCount",
    "Dependents",
})

# Ground-truth label column users tend to leave in their exports.
RESERVED_COLUMN: str = "Risk"

# The scoring API accepts at most this many rows per request.
MAX_REQUEST_ROWS: int = 10

RISK_LABELS: Tuple[str, ...] = (
    "No Risk",
    "Low Risk",
    "Medium Risk",
    "High Risk",
)

RISK_CSS_CLASSES: Dict[str, str] = {
    "No Risk": "no-risk",
    "Low Risk": "low-risk",
    "Medium Risk": "medium-risk",
    "High Risk": "high-risk",
}
UNKNOWN_CSS_CLASS: str = "unknown-risk"

UNKNOWN_LABEL: str = "Unknown"
ZERO_PERCENT_TEXT: str = "0.0%"

PREDICTION_FIELDS: Tuple[str, str] = ("prediction", "probability")
