from fastapi import APIRouter, Depends, Request

from clarify.core.rate_limit import rate_limit
from clarify.core.security import require_api_key
from clarify.schemas.insights import (
    InterviewTrapsRequest,
    InterviewTrapsResponse,
    LearningPathwayRequest,
    LearningPathwayResponse,
    RewriteBulletRequest,
    RewriteBulletResponse,
    SignalAuditRequest,
    SignalAuditResponse,
    SummaryRequest,
    SummaryResponse,
)
from clarify.services.insights_service import get_insight_service

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/insights/summary", response_model=SummaryResponse)
@rate_limit()
def insights_summary(request: Request, payload: SummaryRequest):
    _ = request
    return get_insight_service().executive_summary(
        payload.resume_text,
        payload.job_description_text,
        payload.score,
    )


@router.post("/insights/interview-traps", response_model=InterviewTrapsResponse)
@rate_limit()
def insights_interview_traps(request: Request, payload: InterviewTrapsRequest):
    _ = request
    traps = get_insight_service().interview_traps(payload.missing_keywords, payload.job_description_text)
    return InterviewTrapsResponse(traps=traps)


@router.post("/insights/learning-pathway", response_model=LearningPathwayResponse)
@rate_limit()
def insights_learning_pathway(request: Request, payload: LearningPathwayRequest):
    _ = request
    return LearningPathwayResponse(pathway=get_insight_service().learning_pathway(payload.skill))


@router.post("/insights/rewrite-bullet", response_model=RewriteBulletResponse)
@rate_limit()
def insights_rewrite_bullet(request: Request, payload: RewriteBulletRequest):
    _ = request
    return get_insight_service().rewrite_bullet(payload.bullet, payload.keyword, payload.job_description_text)


@router.post("/insights/signal-audit", response_model=SignalAuditResponse)
@rate_limit()
def insights_signal_audit(request: Request, payload: SignalAuditRequest):
    _ = request
    return SignalAuditResponse(audit=get_insight_service().signal_audit(payload.resume_text))
