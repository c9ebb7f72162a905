from typing import Optional
from config import settings, logger
from config.constants import LLM_CONFIG
from models.verdicts import AnalysisOutcome
from prompts import build_analysis_prompt
from utils.parsing import parse_analysis_response
from utils.validation import validate_claim
from . import llm


class AnalysisClient:
    """Sends one claim to Gemini and turns the grounded reply into an AnalysisOutcome."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = LLM_CONFIG.REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.model = model or settings.GEMINI_MODEL
        self.base_url = base_url or settings.GEMINI_BASE_URL
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    async def analyze(self, claim: str) -> AnalysisOutcome:
        validate_claim(claim)
        prompt = build_analysis_prompt(claim)

        logger.info("Analyzing claim '%s' with %s", claim[:50], self.model)
        result = await llm.call_gemini(
            prompt,
            api_key=self.api_key,
            endpoint=self.endpoint,
            timeout=self.timeout,
        )

        parsed = parse_analysis_response(result["text"], result["grounding_chunks"])
        outcome = AnalysisOutcome(
            claim=claim,
            verdict=parsed.verdict,
            credibility_score=parsed.credibility_score,
            analysis=parsed.analysis,
            sources=parsed.sources,
        )
        logger.info(
            f"Analysis {outcome.id} complete: verdict={outcome.verdict.value}, "
            f"score={outcome.credibility_score}, sources={len(outcome.sources)}"
        )
        return outcome
