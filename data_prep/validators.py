"""
Checks applied to an uploaded CSV before it reaches the scoring client.

Two stages:
- check_selected_file: blocking checks on the raw file (type, size). Raises.
- validate_table: informational checks on the parsed table. Collects
  warnings the user should see but which never stop the analysis.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List

from core.config import UploadLimits
from core.errors import FileTooLarge, FileTypeInvalid
from core.schema import MAX_REQUEST_ROWS, NUMERIC_COLUMNS, RESERVED_COLUMN

from .loader import SelectedFile
from .table_builder import CsvTable


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def is_csv_file(selected: SelectedFile, limits: UploadLimits = UploadLimits()) -> bool:
    return (
        selected.mime_type in limits.allowed_mime_types
        or selected.name.lower().endswith(limits.allowed_suffix)
    )


def check_selected_file(selected: SelectedFile, limits: UploadLimits = UploadLimits()) -> None:
    """Raise FileTypeInvalid / FileTooLarge; return None when the file is acceptable."""
    if not is_csv_file(selected, limits):
        raise FileTypeInvalid(f"{selected.name!r} has type {selected.mime_type!r}")
    if selected.size > limits.max_bytes:
        raise FileTooLarge(f"{selected.name!r} is {selected.size} bytes (max {limits.max_bytes})")


def validate_table(table: CsvTable) -> ValidationResult:
    """Non-blocking data quality checks on a parsed table."""
    result = ValidationResult()
    n_cols = len(table.headers)

    if table.total_rows == 0:
        result.warnings.append("File has a header row but no data rows.")

    # --- Header ---
    dups = sorted(name for name, n in Counter(table.headers).items() if n > 1)
    if dups:
        result.warnings.append(f"Duplicate column names (first occurrence is used): {dups}")

    blank = sum(1 for h in table.headers if h == "")
    if blank:
        result.warnings.append(f"{blank} column(s) have an empty name.")

    if table.has_reserved_column:
        result.warnings.append(f'Column "{RESERVED_COLUMN}" will not be sent for scoring.')

    missing_numeric = sorted(NUMERIC_COLUMNS.difference(table.headers))
    if missing_numeric:
        result.warnings.append(f"Expected numeric columns not found: {missing_numeric}")

    # --- Row shape ---
    n_short = sum(1 for n in table.raw_row_lengths if n < n_cols)
    n_long = sum(1 for n in table.raw_row_lengths if n > n_cols)
    if n_short:
        result.warnings.append(f"{n_short} rows have fewer fields than the header; blanks used.")
    if n_long:
        result.warnings.append(f"{n_long} rows have more fields than the header; extras ignored.")

    if table.total_rows > MAX_REQUEST_ROWS:
        result.warnings.append(
            f"Only the first {MAX_REQUEST_ROWS} of {table.total_rows} rows will be analyzed."
        )

    return result


def describe_table(table: CsvTable) -> str:
    """Success message shown after a file is loaded."""
    total = table.total_rows
    risk_note = f' Column "{RESERVED_COLUMN}" removed automatically.' if table.has_reserved_column else ""
    if total > MAX_REQUEST_ROWS:
        return (
            f"File loaded successfully! {table.analyzed_rows} of {total} rows will be "
            f"analyzed (limited to {MAX_REQUEST_ROWS} for the API).{risk_note}"
        )
    return f"File loaded successfully! {total} data rows found.{risk_note}"
