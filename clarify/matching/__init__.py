from .classifier import KeywordAccumulator, KeywordTally, accumulate_phrases, accumulate_tokens, tokenize
from .engine import InvalidInputError, KeywordMatcher, analyze, get_default_matcher
from .normalizer import normalize_text
from .phrases import PhraseExtraction, extract_phrases
from .scorer import ScoringWeights, detect_weak_words, score

__all__ = [
    "InvalidInputError",
    "KeywordMatcher",
    "analyze",
    "get_default_matcher",
    "normalize_text",
    "PhraseExtraction",
    "extract_phrases",
    "KeywordAccumulator",
    "KeywordTally",
    "accumulate_phrases",
    "accumulate_tokens",
    "tokenize",
    "ScoringWeights",
    "detect_weak_words",
    "score",
]
