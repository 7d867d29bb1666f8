from fastapi import APIRouter, Depends, HTTPException, Request, status

from clarify.core.rate_limit import rate_limit
from clarify.core.security import require_api_key
from clarify.matching import InvalidInputError
from clarify.schemas.analysis import AnalysisSummary, AnalyzeRequest
from clarify.services.analysis_service import run_analysis

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalysisSummary,
    summary="Match a resume against a job description",
)
@rate_limit()
def analyze_texts(request: Request, payload: AnalyzeRequest, _: None = Depends(require_api_key)):
    _ = request
    try:
        return run_analysis(payload)
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
