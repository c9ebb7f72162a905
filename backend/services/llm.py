from typing import Dict, Any, List, Optional
import httpx
from config import settings, logger
from config.constants import LLM_CONFIG
from exceptions import AnalysisFailure


def build_grounded_request(prompt: str) -> Dict[str, Any]:
    """generateContent body with the Google Search grounding tool enabled."""
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "tools": [{"google_search": {}}],
    }


def extract_candidate(data: Any) -> Dict[str, Any]:
    """Pull the response text and grounding chunks out of the first candidate."""
    if not isinstance(data, dict):
        raise AnalysisFailure("Response body is not a JSON object")

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        feedback = data.get("promptFeedback")
        logger.error("Gemini returned no candidates. promptFeedback=%s", feedback)
        raise AnalysisFailure("Response contained no candidates")

    candidate = candidates[0]
    content = candidate.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    text = ""
    if isinstance(parts, list):
        text = "".join(
            p["text"] for p in parts
            if isinstance(p, dict) and isinstance(p.get("text"), str)
        )

    metadata = candidate.get("groundingMetadata") or {}
    chunks: List[Any] = []
    if isinstance(metadata, dict) and isinstance(metadata.get("groundingChunks"), list):
        chunks = metadata["groundingChunks"]

    return {"text": text, "grounding_chunks": chunks}


async def call_gemini(
    prompt: str,
    *,
    api_key: Optional[str] = None,
    endpoint: Optional[str] = None,
    timeout: float = LLM_CONFIG.REQUEST_TIMEOUT,
) -> Dict[str, Any]:
    """
    Call Gemini generateContent with search grounding.

    Returns {"raw", "text", "grounding_chunks"}. Every failure is raised as
    AnalysisFailure; there is no retry here.
    """
    api_key = settings.GEMINI_API_KEY if api_key is None else api_key
    endpoint = endpoint or settings.GEMINI_ENDPOINT

    if not api_key:
        logger.critical("GEMINI_API_KEY not configured.")
        raise AnalysisFailure("API key not configured")

    headers = {"Content-Type": "application/json", "x-goog-api-key": api_key}
    body = build_grounded_request(prompt)

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=LLM_CONFIG.CONNECT_TIMEOUT)) as client:
            response = await client.post(endpoint, headers=headers, json=body)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
        raise AnalysisFailure(f"HTTP {e.response.status_code}") from e
    except httpx.TimeoutException as e:
        logger.error("Gemini request timed out after %.1fs: %s", timeout, e)
        raise AnalysisFailure("Request timed out") from e
    except httpx.RequestError as e:
        logger.error("Gemini request error for URL %s: %s", endpoint, str(e))
        raise AnalysisFailure(f"Request failed: {str(e)}") from e
    except ValueError as e:
        logger.error("Gemini returned a body that is not valid JSON: %s", e)
        raise AnalysisFailure("Malformed response body") from e
    except Exception as e:
        logger.exception("Unexpected error calling Gemini API.")
        raise AnalysisFailure(f"Unexpected error: {str(e)}") from e

    extracted = extract_candidate(data)
    return {"raw": data, **extracted}
