"""
Core package: column schema, configuration, error taxonomy, logging and
shared helpers. No business logic lives here.
"""

from .schema import NUMERIC_COLUMNS, RESERVED_COLUMN, MAX_REQUEST_ROWS, RISK_LABELS
from .config import ScoringConfig, UploadLimits
from .errors import (
    RiskAnalysisError,
    FileTypeInvalid,
    FileTooLarge,
    FileReadFailed,
    EmptyOrUnparseableTable,
    TransformFailed,
    ScoringRequestFailed,
)
from .utils import leading_int, is_probability, format_percent

__all__ = [
    "NUMERIC_COLUMNS",
    "RESERVED_COLUMN",
    "MAX_REQUEST_ROWS",
    "RISK_LABELS",
    "ScoringConfig",
    "UploadLimits",
    "RiskAnalysisError",
    "FileTypeInvalid",
    "FileTooLarge",
    "FileReadFailed",
    "EmptyOrUnparseableTable",
    "TransformFailed",
    "ScoringRequestFailed",
    "leading_int",
    "is_probability",
    "format_percent",
]
