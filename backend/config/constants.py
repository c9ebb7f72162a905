from dataclasses import dataclass


@dataclass(frozen=True)
class LLMConfig:
    REQUEST_TIMEOUT: float = 60.0
    CONNECT_TIMEOUT: float = 10.0


@dataclass(frozen=True)
class HistoryConfig:
    CAPACITY: int = 10
    STORAGE_KEY: str = "verifact_history"


@dataclass(frozen=True)
class CredibilityConfig:
    """Score bands used to colour results (score is 0-100)."""
    HIGH_THRESHOLD: int = 70
    MEDIUM_THRESHOLD: int = 40


@dataclass(frozen=True)
class ParserConfig:
    DEFAULT_SCORE: int = 50
    DEFAULT_SOURCE_TITLE: str = "External Source"


LLM_CONFIG = LLMConfig()
HISTORY_CONFIG = HistoryConfig()
CREDIBILITY_CONFIG = CredibilityConfig()
PARSER_CONFIG = ParserConfig()
