from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from clarify.core.config import settings


class KeywordCategory(str, Enum):
    HARD_SKILL = "Core Competency"
    SOFT_SIGNAL = "Work Style"
    PHRASE = "Industry Term"
    UNKNOWN = "Other"


class MatchStatus(str, Enum):
    PRESENT = "Found"
    MISSING = "Missing"


class SignificanceLevel(str, Enum):
    CRITICAL = "Required"
    HIGH = "Preferred"
    NORMAL = "Mentioned"


SIGNIFICANCE_ORDER = {
    SignificanceLevel.CRITICAL: 0,
    SignificanceLevel.HIGH: 1,
    SignificanceLevel.NORMAL: 2,
}


class KeywordResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    category: KeywordCategory
    count_in_jd: int = Field(default=0, ge=0, alias="countInJD")
    count_in_resume: int = Field(default=0, ge=0, alias="countInResume")
    significance: SignificanceLevel = SignificanceLevel.NORMAL
    significance_reason: str = Field(default="", alias="significanceReason")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> MatchStatus:
        return MatchStatus.PRESENT if self.count_in_resume > 0 else MatchStatus.MISSING


class ImpactMetric(BaseModel):
    found: str
    suggested: str


class CalculationBreakdown(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hard_skills_score: int = Field(ge=0, le=100, alias="hardSkillsScore")
    soft_signals_score: int = Field(ge=0, le=100, alias="softSignalsScore")
    phrases_score: int = Field(ge=0, le=100, alias="phrasesScore")


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    total_jd_keywords: int = Field(ge=0, alias="totalJDKeywords")
    matched_keywords: int = Field(ge=0, alias="matchedKeywords")
    results: list[KeywordResult] = Field(default_factory=list)
    impact_score: int = Field(ge=0, le=100, alias="impactScore")
    weak_words_found: list[ImpactMetric] = Field(default_factory=list, alias="weakWordsFound")
    calculation_breakdown: CalculationBreakdown = Field(alias="calculationBreakdown")


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(default="", max_length=settings.max_input_chars, alias="resumeText")
    job_description_text: str = Field(
        default="",
        max_length=settings.max_input_chars,
        alias="jobDescriptionText",
    )
