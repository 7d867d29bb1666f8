from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from clarify.core.config import settings


class SummaryRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=settings.max_input_chars)
    job_description_text: str = Field(min_length=1, max_length=settings.max_input_chars)
    score: int = Field(ge=0, le=100)


class SummaryResponse(BaseModel):
    summary: str
    generated: bool


class InterviewTrapsRequest(BaseModel):
    missing_keywords: list[str] = Field(default_factory=list, max_length=40)
    job_description_text: str = Field(min_length=1, max_length=settings.max_input_chars)


class InterviewTrap(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str
    reason: str = ""
    suggested_answer: str = Field(default="", alias="suggestedAnswer")


class InterviewTrapsResponse(BaseModel):
    traps: list[InterviewTrap] = Field(default_factory=list)


class LearningPathwayRequest(BaseModel):
    skill: str = Field(min_length=1, max_length=120)


class LearningResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    url: str = ""
    type: Literal["Free", "Paid"] = "Free"
    platform: str = ""
    description: str = ""
    duration: str = ""
    investment_level: str | None = Field(default=None, alias="investmentLevel")


class FieldGuide(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str = ""
    amazon_url: str = Field(default="", alias="amazonUrl")
    why_it_works: str = Field(default="", alias="whyItWorks")


class LearningPathway(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    skill: str
    project_title: str = Field(default="", alias="projectTitle")
    project_idea: str = Field(default="", alias="projectIdea")
    time_estimate: str = Field(default="", alias="timeEstimate")
    difficulty: Literal["Beginner", "Intermediate", "Advanced"] = "Intermediate"
    future_resume_bullet: str = Field(default="", alias="futureResumeBullet")
    value_proposition: str = Field(default="", alias="valueProposition")
    interview_talking_points: list[str] = Field(default_factory=list, alias="interviewTalkingPoints")
    resources: list[LearningResource] = Field(default_factory=list)
    field_guide: FieldGuide | None = Field(default=None, alias="fieldGuide")


class LearningPathwayResponse(BaseModel):
    pathway: LearningPathway | None = None


class RewriteBulletRequest(BaseModel):
    bullet: str = Field(min_length=1, max_length=1000)
    keyword: str = Field(min_length=1, max_length=120)
    job_description_text: str = Field(min_length=1, max_length=settings.max_input_chars)


class RewriteBulletResponse(BaseModel):
    bullet: str
    generated: bool


class SignalAuditRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=settings.max_input_chars)


class SignalAuditResponse(BaseModel):
    audit: dict[str, Any] | None = None
