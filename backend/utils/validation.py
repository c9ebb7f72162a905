from typing import Optional
from exceptions import ValidationException


def validate_claim(claim: Optional[str]) -> str:
    """
    Reject empty or whitespace-only claims.

    The claim is returned unmodified; it is stored and displayed exactly as
    the user typed it.
    """
    if claim is None or not isinstance(claim, str):
        raise ValidationException("claim", "Claim must be a string")
    if not claim.strip():
        raise ValidationException("claim", "Claim cannot be empty")
    return claim
