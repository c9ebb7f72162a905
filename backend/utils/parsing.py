import re
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple
from config.constants import PARSER_CONFIG
from models.verdicts import Source, Verdict

VERDICT_PATTERN = re.compile(
    r"VERDICT:\s*(PARTIALLY[ _]TRUE|TRUE|FALSE|MISLEADING|UNVERIFIED)",
    re.IGNORECASE
)
SCORE_PATTERN = re.compile(r"SCORE:\s*(\d+)")
ANALYSIS_LABEL_PATTERN = re.compile(r"ANALYSIS:\s*", re.IGNORECASE)


class ParsedAnalysis(NamedTuple):
    verdict: Verdict
    credibility_score: int
    analysis: str
    sources: List[Source]


def _line_span(text: str, match: re.Match) -> Tuple[int, int]:
    """Span of the whole line containing `match`, trailing newline included."""
    start = text.rfind("\n", 0, match.start()) + 1
    end = text.find("\n", match.end())
    end = len(text) if end == -1 else end + 1
    return start, end


def extract_verdict(text: str) -> Tuple[Verdict, Optional[re.Match]]:
    """Return the first recognised verdict, or UNVERIFIED."""
    m = VERDICT_PATTERN.search(text or "")
    if not m:
        return Verdict.UNVERIFIED, None
    return Verdict(m.group(1)), m


def extract_score(text: str) -> Tuple[int, Optional[re.Match]]:
    """Return the first SCORE value as-is (no clamping), or the default."""
    m = SCORE_PATTERN.search(text or "")
    if not m:
        return PARSER_CONFIG.DEFAULT_SCORE, None
    try:
        return int(m.group(1)), m
    except ValueError:
        return PARSER_CONFIG.DEFAULT_SCORE, None


def extract_analysis_text(text: str, *header_matches: Optional[re.Match]) -> str:
    """Strip the matched header lines and the ANALYSIS label from the response."""
    if not text:
        return ""
    spans = sorted({_line_span(text, m) for m in header_matches if m is not None}, reverse=True)
    for start, end in spans:
        text = text[:start] + text[end:]
    text = ANALYSIS_LABEL_PATTERN.sub("", text, count=1)
    return text.strip()


def extract_sources(grounding_chunks: Optional[Iterable[Any]]) -> List[Source]:
    """Turn grounding chunks into Sources, dropping non-web and empty-uri entries."""
    sources: List[Source] = []
    if not grounding_chunks or isinstance(grounding_chunks, (str, bytes, dict)):
        return sources

    for chunk in grounding_chunks:
        if not isinstance(chunk, dict):
            continue
        web = chunk.get("web")
        if not isinstance(web, dict) or not web:
            continue
        uri = str(web.get("uri") or "").strip()
        if not uri:
            continue
        title = str(web.get("title") or "").strip() or PARSER_CONFIG.DEFAULT_SOURCE_TITLE
        sources.append(Source(title=title, uri=uri))
    return sources


def parse_analysis_response(text: Optional[str], grounding_chunks: Optional[Iterable[Any]] = None) -> ParsedAnalysis:
    """
    Parse a model response into verdict, score, narrative and sources.

    Never raises: anything unrecognised falls back to UNVERIFIED, the default
    score, the full stripped text and an empty source list.
    """
    if text is None:
        text = ""
    elif not isinstance(text, str):
        text = str(text)

    verdict, verdict_match = extract_verdict(text)
    score, score_match = extract_score(text)
    analysis = extract_analysis_text(text, verdict_match, score_match)
    sources = extract_sources(grounding_chunks)

    return ParsedAnalysis(
        verdict=verdict,
        credibility_score=score,
        analysis=analysis,
        sources=sources,
    )
