import pytest
import os
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables before any imports."""
    env_vars = {
        "GEMINI_API_KEY": "test_gemini_key",
        "GEMINI_MODEL": "gemini-3-flash-preview",
    }
    for key, value in env_vars.items():
        os.environ[key] = value
    yield
    # Cleanup
    for key in env_vars.keys():
        os.environ.pop(key, None)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def json_response():
    """Factory for a successful httpx response mock returning `payload`."""
    def _make(payload):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = payload
        mock_response.raise_for_status = MagicMock()
        return mock_response
    return _make


@pytest.fixture
def sample_gemini_response():
    """Grounded Gemini response for the moon-landing claim."""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "VERDICT: FALSE\nSCORE: 5\nANALYSIS: Overwhelming evidence..."}
                    ]
                },
                "groundingMetadata": {
                    "groundingChunks": [
                        {"web": {"title": "NASA", "uri": "https://nasa.gov"}}
                    ]
                }
            }
        ]
    }


@pytest.fixture
def make_outcome():
    """Factory for AnalysisOutcome records with distinct ids."""
    from models.verdicts import AnalysisOutcome, Source, Verdict

    def _make(claim="Test claim", verdict=Verdict.TRUE, score=80, **kwargs):
        return AnalysisOutcome(
            claim=claim,
            verdict=verdict,
            credibility_score=score,
            analysis=kwargs.pop("analysis", f"Analysis of {claim}"),
            sources=kwargs.pop("sources", [Source(title="Example", uri="https://example.com")]),
            **kwargs
        )
    return _make


@pytest.fixture
def memory_store():
    from services.history import HistoryStore
    from utils.storage import InMemoryStorage
    return HistoryStore(InMemoryStorage())


@pytest.fixture
def mock_analysis_client(make_outcome):
    """AnalysisClient stand-in whose analyze() returns a fresh outcome per claim."""
    client = MagicMock()

    async def _analyze(claim):
        return make_outcome(claim=claim)

    client.analyze = AsyncMock(side_effect=_analyze)
    return client


@pytest.fixture
def test_client(mock_analysis_client, memory_store):
    """TestClient for the FastAPI app with an in-memory session."""
    import main
    from services.session import AnalysisSession

    main.app.state.session = AnalysisSession(mock_analysis_client, memory_store)
    yield TestClient(main.app)
    main.app.state.session = None
