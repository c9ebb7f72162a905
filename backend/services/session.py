import asyncio
from typing import Optional
from config import logger
from exceptions import AnalysisFailure, ValidationException
from models.session import SessionSnapshot, SessionStatus
from models.verdicts import AnalysisOutcome
from utils.validation import validate_claim
from .analysis import AnalysisClient
from .credibility import get_credibility_tier
from .history import HistoryStore


class AnalysisSession:
    """
    Coordinates analysis requests for one user.

    At most one analysis runs at a time: a submit while another is in flight
    is ignored, not queued. Only a successful analysis writes to history; a
    failure sets `error` and leaves `current` and history untouched.
    """

    def __init__(self, client: AnalysisClient, store: HistoryStore):
        self.client = client
        self.store = store
        self.status = SessionStatus.IDLE
        self.error: Optional[str] = None
        self.draft: str = ""

    @property
    def is_analyzing(self) -> bool:
        return self.status is SessionStatus.ANALYZING

    @property
    def current_result(self) -> Optional[AnalysisOutcome]:
        return self.store.current

    async def submit(self, claim: Optional[str] = None) -> bool:
        """Run one analysis. Returns False when the submission was ignored."""
        claim = self.draft if claim is None else claim

        if self.is_analyzing:
            logger.info("Analysis already in progress; ignoring new submission.")
            return False
        try:
            validate_claim(claim)
        except ValidationException as e:
            logger.info("Ignoring submission: %s", e.message)
            return False

        self.status = SessionStatus.ANALYZING
        self.error = None
        try:
            outcome = await self.client.analyze(claim)
        except AnalysisFailure as e:
            logger.error("Analysis failed: %s", e.reason)
            self.error = e.message
            self.status = SessionStatus.FAILED
            return True
        except (asyncio.CancelledError, Exception):
            self.status = SessionStatus.IDLE
            raise

        self.store.set_current(outcome)
        self.store.push(outcome)
        self.draft = ""
        self.status = SessionStatus.SUCCEEDED
        return True

    def select(self, outcome_id: str) -> Optional[AnalysisOutcome]:
        """Re-display a history entry. Does not call the model or touch history."""
        outcome = self.store.get(outcome_id)
        if outcome is None:
            logger.warning("No history entry with id %s", outcome_id)
            return None

        self.store.set_current(outcome)
        if not self.is_analyzing:
            self.error = None
            self.status = SessionStatus.SUCCEEDED
        return outcome

    def clear(self) -> None:
        self.store.clear()

    def snapshot(self) -> SessionSnapshot:
        current = self.current_result
        return SessionSnapshot(
            status=self.status,
            is_analyzing=self.is_analyzing,
            error=self.error,
            current_result=current,
            credibility_tier=get_credibility_tier(current.credibility_score) if current else None,
            history=list(self.store.entries),
        )
