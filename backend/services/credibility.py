from config.constants import CREDIBILITY_CONFIG
from models.verdicts import CredibilityTier


def get_credibility_tier(score: int) -> CredibilityTier:
    if score > CREDIBILITY_CONFIG.HIGH_THRESHOLD:
        return "High"
    elif score > CREDIBILITY_CONFIG.MEDIUM_THRESHOLD:
        return "Medium"
    else:
        return "Low"
