from __future__ import annotations

import logging
import time

from clarify.matching import KeywordMatcher, get_default_matcher
from clarify.schemas.analysis import AnalysisSummary, AnalyzeRequest

logger = logging.getLogger(__name__)


def run_analysis(payload: AnalyzeRequest, matcher: KeywordMatcher | None = None) -> AnalysisSummary:
    """Run the keyword matcher for one request; ``InvalidInputError`` propagates."""
    engine = matcher or get_default_matcher()
    started = time.perf_counter()
    summary = engine.analyze(payload.resume_text, payload.job_description_text)
    logger.info(
        "analysis_completed score=%s impact=%s jd_keywords=%s matched=%s resume_len=%s jd_len=%s latency_ms=%s",
        summary.score,
        summary.impact_score,
        summary.total_jd_keywords,
        summary.matched_keywords,
        len(payload.resume_text),
        len(payload.job_description_text),
        int((time.perf_counter() - started) * 1000),
    )
    return summary
