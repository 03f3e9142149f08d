"""
Scoring: request construction, scoring clients, response normalization and
the per-user analysis session.
"""

from .envelopes import ScoringRequest, ScoringResponse
from .transformer import to_scoring_request
from .clients import ScoringClient, HttpScoringClient, LocalSimulationClient, build_client
from .normalizer import ResultNormalizer, label_css_class
from .session import AnalysisSession, ValidationMessage

__all__ = [
    "ScoringRequest",
    "ScoringResponse",
    "to_scoring_request",
    "ScoringClient",
    "HttpScoringClient",
    "LocalSimulationClient",
    "build_client",
    "ResultNormalizer",
    "label_css_class",
    "AnalysisSession",
    "ValidationMessage",
]
