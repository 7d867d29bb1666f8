from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable

from clarify.core.scoring import get_scoring_value
from clarify.schemas.analysis import (
    SIGNIFICANCE_ORDER,
    AnalysisSummary,
    CalculationBreakdown,
    ImpactMetric,
    KeywordCategory,
    KeywordResult,
    MatchStatus,
    SignificanceLevel,
)

from .classifier import KeywordTally
from .normalizer import normalize_text

# "react.js required." must stay one sentence, so a dot only ends a sentence
# when whitespace or the end of the text follows it.
_SENTENCE_SPLIT_RE = re.compile(r"\.(?=\s|$)|[!?\n]")

_DEFAULT_REQUIREMENT_MARKERS = (
    "required",
    "must have",
    "essential",
    "expert",
    "proficiency",
    "minimum",
    "at least",
)

REASON_HARD_REQUIREMENT = "Hard requirement."
REASON_HIGH_FREQUENCY = "High frequency."
REASON_TECHNICAL_TERM = "Technical Term"
REASON_STRONGLY_PREFERRED = "Strongly preferred."
REASON_MENTIONED = "Appears in description."


@dataclass(frozen=True)
class ScoringWeights:
    hard_skills: float = 0.70
    soft_signals: float = 0.20
    phrases: float = 0.10
    high_frequency_threshold: int = 3
    preferred_frequency: int = 2
    requirement_markers: tuple[str, ...] = _DEFAULT_REQUIREMENT_MARKERS
    empty_category_score: int = 100
    weak_word_penalty: int = 8

    @classmethod
    def from_config(cls) -> ScoringWeights:
        markers = get_scoring_value("matching.significance.requirement_markers", None)
        return cls(
            hard_skills=float(get_scoring_value("matching.weights.hard_skills", 0.70)),
            soft_signals=float(get_scoring_value("matching.weights.soft_signals", 0.20)),
            phrases=float(get_scoring_value("matching.weights.phrases", 0.10)),
            high_frequency_threshold=int(get_scoring_value("matching.significance.high_frequency_threshold", 3)),
            preferred_frequency=int(get_scoring_value("matching.significance.preferred_frequency", 2)),
            requirement_markers=(
                tuple(str(item).strip().lower() for item in markers if str(item).strip())
                if isinstance(markers, list)
                else _DEFAULT_REQUIREMENT_MARKERS
            ),
            empty_category_score=int(get_scoring_value("matching.empty_category_score", 100)),
            weak_word_penalty=int(get_scoring_value("impact.weak_word_penalty", 8)),
        )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_sentences(jd_text: str) -> list[str]:
    return _SENTENCE_SPLIT_RE.split((jd_text or "").lower())


def is_required_in_text(term: str, sentences: Iterable[str], markers: Iterable[str]) -> bool:
    needle = term.lower()
    # "ci/cd" is matched as "ci cd", so the sentence may only hold the normalized form.
    normalized_needle = normalize_text(needle)
    marker_list = tuple(markers)
    for sentence in sentences:
        if not any(marker in sentence for marker in marker_list):
            continue
        if needle in sentence:
            return True
        if normalized_needle and normalized_needle != needle and normalized_needle in normalize_text(sentence):
            return True
    return False


def assign_significance(
    tally: KeywordTally,
    sentences: list[str],
    weights: ScoringWeights,
) -> tuple[SignificanceLevel, str]:
    if is_required_in_text(tally.text, sentences, weights.requirement_markers):
        return SignificanceLevel.CRITICAL, REASON_HARD_REQUIREMENT
    if tally.count_in_jd >= weights.high_frequency_threshold:
        return SignificanceLevel.CRITICAL, REASON_HIGH_FREQUENCY
    if tally.category == KeywordCategory.PHRASE:
        return SignificanceLevel.HIGH, REASON_TECHNICAL_TERM
    if tally.count_in_jd == weights.preferred_frequency:
        return SignificanceLevel.HIGH, REASON_STRONGLY_PREFERRED
    return SignificanceLevel.NORMAL, REASON_MENTIONED


def rank_results(results: Iterable[KeywordResult]) -> list[KeywordResult]:
    return sorted(
        results,
        key=lambda item: (
            SIGNIFICANCE_ORDER[item.significance],
            0 if item.status == MatchStatus.MISSING else 1,
            item.text,
        ),
    )


def category_score(results: list[KeywordResult], category: KeywordCategory, empty_score: int = 100) -> int:
    members = [item for item in results if item.category == category]
    if not members:
        return empty_score
    matched = sum(1 for item in members if item.status == MatchStatus.PRESENT)
    return round_half_up((matched / len(members)) * 100)


def composite_score(breakdown: CalculationBreakdown, weights: ScoringWeights) -> int:
    raw = (
        breakdown.hard_skills_score * weights.hard_skills
        + breakdown.soft_signals_score * weights.soft_signals
        + breakdown.phrases_score * weights.phrases
    )
    return max(0, min(100, round_half_up(raw)))


def detect_weak_words(resume_text: str, weak_verbs: Iterable[tuple[str, str]]) -> list[ImpactMetric]:
    """One entry per weak verb found anywhere in the raw resume, in map order."""
    found: list[ImpactMetric] = []
    for weak, strong in weak_verbs:
        if re.search(rf"\b{re.escape(weak)}\b", resume_text or "", re.IGNORECASE):
            found.append(ImpactMetric(found=weak, suggested=strong))
    return found


def impact_score(hit_count: int, penalty: int = 8) -> int:
    return max(0, 100 - penalty * hit_count)


def score(
    tallies: Iterable[KeywordTally],
    jd_text: str,
    *,
    weak_words: list[ImpactMetric] | None = None,
    weights: ScoringWeights | None = None,
) -> AnalysisSummary:
    weights = weights or ScoringWeights()
    weak_words = list(weak_words or [])
    sentences = split_sentences(jd_text)

    results: list[KeywordResult] = []
    for tally in tallies:
        if tally.count_in_jd <= 0:
            continue
        significance, reason = assign_significance(tally, sentences, weights)
        results.append(
            KeywordResult(
                text=tally.text,
                category=tally.category,
                count_in_jd=tally.count_in_jd,
                count_in_resume=tally.count_in_resume,
                significance=significance,
                significance_reason=reason,
            )
        )

    breakdown = CalculationBreakdown(
        hard_skills_score=category_score(results, KeywordCategory.HARD_SKILL, weights.empty_category_score),
        soft_signals_score=category_score(results, KeywordCategory.SOFT_SIGNAL, weights.empty_category_score),
        phrases_score=category_score(results, KeywordCategory.PHRASE, weights.empty_category_score),
    )

    return AnalysisSummary(
        score=composite_score(breakdown, weights),
        total_jd_keywords=len(results),
        matched_keywords=sum(1 for item in results if item.status == MatchStatus.PRESENT),
        results=rank_results(results),
        impact_score=impact_score(len(weak_words), weights.weak_word_penalty),
        weak_words_found=weak_words,
        calculation_breakdown=breakdown,
    )
