from .models import ParseRequest, ParseResponse, ScoreRequest, ScoreResponse, Sections

PLACEHOLDER_TITLE = "Software Engineer"

# Placeholder values until real semantic scoring exists
SEMANTIC_THRESHOLD = 0.12
STUB_SEMANTIC_SCORE = 0.15

RATIONALE_PASSED = "Stub: rule or semantic threshold passed."
RATIONALE_FAILED = "Stub: neither rule nor semantic threshold passed."


def build_parse_response(req: ParseRequest, placeholder_title: str = PLACEHOLDER_TITLE) -> ParseResponse:
    # No file is read yet; only the candidate id is echoed back
    return ParseResponse(
        candidate_id=req.candidate_id,
        sections=Sections(titles=[placeholder_title]),
    )


def title_matches(title: str, keywords: list[str]) -> bool:
    """Case-insensitive substring match of any keyword against the title."""
    folded = title.casefold()
    return any(k.casefold() in folded for k in keywords)


def score_candidate(
    req: ScoreRequest,
    semantic_threshold: float = SEMANTIC_THRESHOLD,
    semantic_score: float = STUB_SEMANTIC_SCORE,
) -> ScoreResponse:
    title = req.title or ""
    keywords = (req.criteria.qualified_if_any_title_contains or []) if req.criteria else []
    rule_match = title_matches(title, keywords)

    qualified = rule_match or semantic_score >= semantic_threshold
    return ScoreResponse(
        qualified=qualified,
        matched_title=title if rule_match else None,
        rule_match=rule_match,
        semantic_score=semantic_score,
        rationale=RATIONALE_PASSED if qualified else RATIONALE_FAILED,
    )
