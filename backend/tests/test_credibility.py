import pytest
from services.credibility import get_credibility_tier


class TestGetCredibilityTier:
    @pytest.mark.parametrize("score,expected", [
        (100, "High"),
        (71, "High"),
        (70, "Medium"),
        (41, "Medium"),
        (40, "Low"),
        (0, "Low"),
    ])
    def test_bands(self, score, expected):
        assert get_credibility_tier(score) == expected

    def test_out_of_range_scores(self):
        assert get_credibility_tier(150) == "High"
        assert get_credibility_tier(-5) == "Low"
