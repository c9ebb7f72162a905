from .verdicts import (
    Verdict,
    Source,
    AnalysisOutcome,
    CredibilityTier,
)
from .session import (
    SessionStatus,
    SessionSnapshot,
    AnalyzeRequest,
    AnalyzeResponse,
)

__all__ = [
    "Verdict",
    "Source",
    "AnalysisOutcome",
    "CredibilityTier",

    "SessionStatus",
    "SessionSnapshot",
    "AnalyzeRequest",
    "AnalyzeResponse",
]
