import pytest
from exceptions import AnalysisFailure


class TestHealthCheckEndpoint:
    """Tests for the health check endpoint."""

    def test_health_check(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "VeriFact" in data["message"]


class TestAnalyzeEndpoint:
    """Tests for the /analyze endpoint."""

    def test_analyze_successful(self, test_client, mock_analysis_client):
        response = test_client.post("/analyze", json={"claim": "The moon landing was faked"})

        assert response.status_code == 200
        data = response.json()
        assert data["accepted"] is True
        state = data["state"]
        assert state["status"] == "succeeded"
        assert state["is_analyzing"] is False
        assert state["error"] is None
        assert state["current_result"]["claim"] == "The moon landing was faked"
        assert state["current_result"]["credibilityScore"] == 80
        assert state["credibility_tier"] == "High"
        assert len(state["history"]) == 1
        mock_analysis_client.analyze.assert_awaited_once()

    def test_analyze_empty_claim_ignored(self, test_client, mock_analysis_client):
        response = test_client.post("/analyze", json={"claim": "  "})

        assert response.status_code == 200
        assert response.json()["accepted"] is False
        assert response.json()["state"]["status"] == "idle"
        mock_analysis_client.analyze.assert_not_called()

    def test_analyze_missing_claim(self, test_client):
        response = test_client.post("/analyze", json={})
        assert response.status_code == 422

    def test_analyze_failure(self, test_client, mock_analysis_client):
        mock_analysis_client.analyze.side_effect = AnalysisFailure("HTTP 403")

        response = test_client.post("/analyze", json={"claim": "Some claim"})

        assert response.status_code == 200
        state = response.json()["state"]
        assert state["status"] == "failed"
        assert "Failed to analyze news" in state["error"]
        assert state["history"] == []


class TestHistoryEndpoints:
    def test_state(self, test_client):
        test_client.post("/analyze", json={"claim": "one"})
        test_client.post("/analyze", json={"claim": "two"})

        response = test_client.get("/state")

        assert response.status_code == 200
        assert [e["claim"] for e in response.json()["history"]] == ["two", "one"]

    def test_select(self, test_client):
        test_client.post("/analyze", json={"claim": "one"})
        test_client.post("/analyze", json={"claim": "two"})
        older_id = test_client.get("/state").json()["history"][1]["id"]

        response = test_client.post(f"/history/{older_id}/select")

        assert response.status_code == 200
        assert response.json()["current_result"]["claim"] == "one"

    def test_select_unknown(self, test_client):
        response = test_client.post("/history/nope/select")
        assert response.status_code == 404

    def test_clear(self, test_client):
        test_client.post("/analyze", json={"claim": "one"})

        response = test_client.post("/history/clear")

        assert response.status_code == 200
        data = response.json()
        assert data["history"] == []
        assert data["current_result"]["claim"] == "one"


class TestBuildSession:
    def test_uses_given_data_dir(self, tmp_path):
        from main import build_session

        session = build_session(str(tmp_path))
        session.store.clear()

        assert session.store.entries == ()
        assert (tmp_path / "verifact_history.json").exists()
