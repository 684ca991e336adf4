from fastapi import APIRouter

from .config import settings
from .logger import get_logger
from .models import ParseRequest, ParseResponse, ScoreRequest, ScoreResponse
from .scoring import build_parse_response, score_candidate

router = APIRouter()
logger = get_logger(__name__, settings.log_level)


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/parse", response_model=ParseResponse)
def parse_resume(req: ParseRequest):
    # Stub: the file at req.file_path is not opened yet
    logger.info(f"Parse requested for candidate {req.candidate_id} ({req.file_path})")
    return build_parse_response(req, settings.placeholder_title)


@router.post("/score", response_model=ScoreResponse)
def score(req: ScoreRequest):
    result = score_candidate(
        req,
        semantic_threshold=settings.semantic_threshold,
        semantic_score=settings.stub_semantic_score,
    )
    logger.info(
        f"Scored candidate {req.candidate_id}: qualified={result.qualified} "
        f"rule_match={result.rule_match} semantic_score={result.semantic_score}"
    )
    return result
