import time
import uuid
from enum import Enum
from typing import Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CredibilityTier = Literal["High", "Medium", "Low"]


class Verdict(str, Enum):
    TRUE = "TRUE"
    FALSE = "FALSE"
    MISLEADING = "MISLEADING"
    PARTIALLY_TRUE = "PARTIALLY TRUE"
    UNVERIFIED = "UNVERIFIED"

    @classmethod
    def _missing_(cls, value):
        # Accept "partially_true", "Partially True", etc.
        if isinstance(value, str):
            normalized = " ".join(value.replace("_", " ").upper().split())
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class Source(BaseModel):
    """A grounding citation returned by the search tool."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    uri: str = Field(..., min_length=1)


def _new_outcome_id() -> str:
    return uuid.uuid4().hex


def _now_millis() -> int:
    return int(time.time() * 1000)


class AnalysisOutcome(BaseModel):
    """A single fact-check result. Serialized with camelCase keys."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(default_factory=_new_outcome_id, min_length=1)
    claim: str
    verdict: Verdict = Verdict.UNVERIFIED
    credibility_score: int = 50
    analysis: str = ""
    sources: Tuple[Source, ...] = ()
    timestamp: int = Field(default_factory=_now_millis)
