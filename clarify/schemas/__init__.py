from .analysis import (
    AnalysisSummary,
    AnalyzeRequest,
    CalculationBreakdown,
    ImpactMetric,
    KeywordCategory,
    KeywordResult,
    MatchStatus,
    SignificanceLevel,
)

__all__ = [
    "AnalysisSummary",
    "AnalyzeRequest",
    "CalculationBreakdown",
    "ImpactMetric",
    "KeywordCategory",
    "KeywordResult",
    "MatchStatus",
    "SignificanceLevel",
]
