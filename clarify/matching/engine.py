from __future__ import annotations

import logging
from functools import lru_cache

from clarify.schemas.analysis import AnalysisSummary
from clarify.vocabulary import Vocabulary, get_default_vocabulary

from .classifier import KeywordAccumulator, accumulate_phrases, accumulate_tokens, tokenize
from .normalizer import normalize_text
from .phrases import extract_phrases
from .scorer import ScoringWeights, detect_weak_words, score

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    pass


class KeywordMatcher:
    """Deterministic resume vs. job description keyword matcher.

    The vocabulary and weights are fixed at construction; ``analyze`` keeps no
    state between calls, so one instance can serve concurrent requests.
    """

    def __init__(self, vocabulary: Vocabulary | None = None, weights: ScoringWeights | None = None) -> None:
        self._vocabulary = vocabulary if vocabulary is not None else get_default_vocabulary()
        self._weights = weights if weights is not None else ScoringWeights.from_config()

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def analyze(self, resume_text: str, job_description_text: str) -> AnalysisSummary:
        resume_text = resume_text or ""
        job_description_text = job_description_text or ""
        if not resume_text.strip() and not job_description_text.strip():
            raise InvalidInputError("Provide a resume or a job description to analyze.")

        vocabulary = self._vocabulary
        jd_extraction = extract_phrases(normalize_text(job_description_text), vocabulary.phrases)
        resume_extraction = extract_phrases(normalize_text(resume_text), vocabulary.phrases)

        accumulator = KeywordAccumulator()
        accumulate_phrases(accumulator, jd_extraction.phrases, "jd")
        accumulate_phrases(accumulator, resume_extraction.phrases, "resume")
        accumulate_tokens(
            accumulator,
            tokenize(jd_extraction.remaining_text, vocabulary.junk_tokens),
            "jd",
            vocabulary,
        )
        accumulate_tokens(
            accumulator,
            tokenize(resume_extraction.remaining_text, vocabulary.junk_tokens),
            "resume",
            vocabulary,
        )

        weak_words = detect_weak_words(resume_text, vocabulary.weak_verbs)
        summary = score(
            accumulator.jd_entries(),
            job_description_text,
            weak_words=weak_words,
            weights=self._weights,
        )
        logger.debug(
            "keyword_match tracked=%s jd_keywords=%s matched=%s score=%s",
            len(accumulator),
            summary.total_jd_keywords,
            summary.matched_keywords,
            summary.score,
        )
        return summary


@lru_cache(maxsize=1)
def get_default_matcher() -> KeywordMatcher:
    return KeywordMatcher()


def analyze(resume_text: str, job_description_text: str) -> AnalysisSummary:
    return get_default_matcher().analyze(resume_text, job_description_text)
