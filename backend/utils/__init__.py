from .parsing import (
    ParsedAnalysis,
    parse_analysis_response,
    extract_verdict,
    extract_score,
    extract_analysis_text,
    extract_sources,
)
from .storage import KeyValueStorage, InMemoryStorage, JsonFileStorage
from .validation import validate_claim

__all__ = [
    "ParsedAnalysis",
    "parse_analysis_response",
    "extract_verdict",
    "extract_score",
    "extract_analysis_text",
    "extract_sources",
    "KeyValueStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "validate_claim",
]
