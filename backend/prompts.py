ANALYSIS_PROMPT = """
Analyze the following news claim or snippet for its truthfulness and credibility.
Claim: "{claim}"

Instructions:
1. Use Google Search to verify the facts.
2. Determine a verdict: TRUE, FALSE, MISLEADING, PARTIALLY TRUE, or UNVERIFIED.
3. Assign a credibility score from 0 (entirely false) to 100 (entirely true).
4. Provide a detailed analysis explaining why.
5. Format your response clearly so the Verdict and Score can be extracted easily.

IMPORTANT: Start your response with the following format:
VERDICT: [VERDICT]
SCORE: [SCORE]
ANALYSIS: [YOUR ANALYSIS]
"""


def build_analysis_prompt(claim: str) -> str:
    # str.replace, not format(): the claim may contain braces.
    return ANALYSIS_PROMPT.replace("{claim}", claim)
