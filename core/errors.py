"""
Error taxonomy for the ingestion → scoring workflow.

Every member carries the advisory text shown to the user. The pure
components raise them; AnalysisSession catches them at the boundary and
turns them into a single validation message.
"""

from __future__ import annotations


class RiskAnalysisError(Exception):
    """Base class. `user_message` is safe to display as-is."""

    user_message: str = "Unexpected error during risk analysis."

    def __init__(self, detail: str = "", *, user_message: str | None = None):
        super().__init__(detail or self.user_message)
        if user_message is not None:
            self.user_message = user_message


class FileTypeInvalid(RiskAnalysisError):
    user_message = "Please select CSV files only."


class FileTooLarge(RiskAnalysisError):
    user_message = "The file is too large. Maximum size: 10MB"


class FileReadFailed(RiskAnalysisError):
    user_message = "Error processing the CSV file. Check that the format is correct."


class EmptyOrUnparseableTable(RiskAnalysisError):
    user_message = "The CSV file is empty or has no valid data."


class TransformFailed(RiskAnalysisError):
    user_message = "Error preparing the data for analysis."


class ScoringRequestFailed(RiskAnalysisError):
    user_message = "Error during the analysis. Check the logs for details."
