from .llm import call_gemini, build_grounded_request, extract_candidate
from .analysis import AnalysisClient
from .history import HistoryStore
from .session import AnalysisSession
from .credibility import get_credibility_tier

__all__ = [
    "call_gemini",
    "build_grounded_request",
    "extract_candidate",
    "AnalysisClient",
    "HistoryStore",
    "AnalysisSession",
    "get_credibility_tier",
]
