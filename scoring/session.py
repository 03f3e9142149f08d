"""
One user's analysis workflow: select a file, then score it.

AnalysisSession owns the only mutable state in the pipeline (the parsed
table, the last response, the message to show). It is driven from the UI
with `await session.select_file(...)` and `await session.analyze()`.

Two guards:
- `is_analyzing` blocks a second analyze() until the first one settles.
- `generation` is bumped on every file selection; a response that arrives
  for an older generation is dropped instead of overwriting newer state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from core.config import UploadLimits
from core.errors import FileReadFailed, RiskAnalysisError, ScoringRequestFailed
from core.log import get_logger

from data_prep.csv_parser import parse_csv
from data_prep.loader import SelectedFile, read_selected_file
from data_prep.table_builder import CsvTable, build_table
from data_prep.validators import (
    ValidationResult,
    check_selected_file,
    describe_table,
    validate_table,
)

from .clients import ScoringClient
from .envelopes import ScoringRequest, ScoringResponse
from .normalizer import ResultNormalizer
from .transformer import to_scoring_request

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationMessage:
    type: Literal["error", "success"]
    text: str


class AnalysisSession:

    def __init__(self, client: ScoringClient, *, limits: UploadLimits = UploadLimits()):
        self.client = client
        self.limits = limits
        self.generation = 0
        self.is_analyzing = False
        self.message: Optional[ValidationMessage] = None
        self._reset()

    def _reset(self) -> None:
        self.selected_file: Optional[SelectedFile] = None
        self.table: Optional[CsvTable] = None
        self.validation: Optional[ValidationResult] = None
        self.can_analyze = False
        self.last_request: Optional[ScoringRequest] = None
        self.analysis_result: Optional[ScoringResponse] = None

    def clear(self) -> None:
        """Back to the pre-selection baseline. In-flight responses become stale."""
        self.generation += 1
        self._reset()
        self.message = None

    @property
    def normalizer(self) -> ResultNormalizer:
        return ResultNormalizer(self.analysis_result)

    def _fail_file(self, text: str) -> None:
        self._reset()
        self.message = ValidationMessage("error", text)

    async def select_file(self, selected: Optional[SelectedFile]) -> bool:
        """
        Replace the current table with `selected`. Returns True when the file
        was accepted and can be analyzed; on any file-stage error the session
        is reset and `message` holds the reason.
        """
        self.clear()
        if selected is None:
            return False
        generation = self.generation

        try:
            check_selected_file(selected, self.limits)
            text = await read_selected_file(selected)
            table = build_table(parse_csv(text))
        except RiskAnalysisError as exc:
            logger.warning("file_rejected", file_name=selected.name, reason=type(exc).__name__, detail=str(exc))
            if generation == self.generation:
                self._fail_file(exc.user_message)
            return False
        except Exception:
            logger.exception("file_processing_failed", file_name=selected.name)
            if generation == self.generation:
                self._fail_file(FileReadFailed.user_message)
            return False

        if generation != self.generation:
            return False

        self.selected_file = selected
        self.table = table
        self.validation = validate_table(table)
        self.can_analyze = True
        self.message = ValidationMessage("success", describe_table(table))
        logger.info(
            "file_loaded",
            file_name=selected.name,
            size=selected.size,
            rows=table.total_rows,
            columns=len(table.headers),
            warnings=len(self.validation.warnings),
        )
        return True

    async def analyze(self) -> Optional[ResultNormalizer]:
        """
        Transform the current table and score it. Returns the normalizer on
        success; None when there is nothing to analyze, a request is already
        in flight, the request failed, or the file changed meanwhile.
        """
        if self.table is None or not self.can_analyze or self.is_analyzing:
            return None

        generation = self.generation
        table = self.table
        self.is_analyzing = True
        self.analysis_result = None

        try:
            request = to_scoring_request(table.headers, table.records)
            self.last_request = request
            logger.info("analysis_started", engine=self.client.engine, rows=request.row_count, fields=len(request.fields))
            response = await self.client.send(request)
        except RiskAnalysisError as exc:
            logger.error("analysis_failed", reason=type(exc).__name__, detail=str(exc))
            if generation == self.generation:
                self.message = ValidationMessage("error", exc.user_message)
            return None
        except Exception:
            logger.exception("analysis_failed", reason="unexpected")
            if generation == self.generation:
                self.message = ValidationMessage("error", ScoringRequestFailed.user_message)
            return None
        finally:
            self.is_analyzing = False

        if generation != self.generation:
            logger.info("stale_response_dropped", response_generation=generation, current_generation=self.generation)
            return None

        self.analysis_result = response
        normalizer = ResultNormalizer(response)
        count = normalizer.record_count()
        self.message = ValidationMessage(
            "success", f"Risk analysis completed successfully! {count} records analyzed."
        )
        logger.info("analysis_completed", engine=normalizer.engine or self.client.engine, records=count)
        return normalizer
