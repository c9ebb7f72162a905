from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from .verdicts import AnalysisOutcome, CredibilityTier


class SessionStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SessionSnapshot(BaseModel):
    """Everything the presentation layer needs to render."""
    status: SessionStatus
    is_analyzing: bool
    error: Optional[str] = None
    current_result: Optional[AnalysisOutcome] = None
    credibility_tier: Optional[CredibilityTier] = None
    history: List[AnalysisOutcome] = Field(default_factory=list)


class AnalyzeRequest(BaseModel):
    """Request body for /analyze."""
    claim: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "claim": "The moon landing was faked"
            }
        }
    }


class AnalyzeResponse(BaseModel):
    accepted: bool
    state: SessionSnapshot
