"""
Data preparation: reading the uploaded CSV, tokenizing, building the
header/record table, validation.
"""

from .loader import SelectedFile, read_selected_file, decode_csv_bytes
from .csv_parser import parse_csv, split_line
from .table_builder import CsvTable, build_table, rows_to_records
from .validators import (
    ValidationResult,
    check_selected_file,
    describe_table,
    is_csv_file,
    validate_table,
)

__all__ = [
    "SelectedFile",
    "read_selected_file",
    "decode_csv_bytes",
    "parse_csv",
    "split_line",
    "CsvTable",
    "build_table",
    "rows_to_records",
    "ValidationResult",
    "check_selected_file",
    "describe_table",
    "is_csv_file",
    "validate_table",
]
