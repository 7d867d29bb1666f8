from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable

from .normalizer import normalize_text


@dataclass(slots=True)
class PhraseExtraction:
    phrases: list[str] = field(default_factory=list)
    remaining_text: str = ""


@lru_cache(maxsize=512)
def _phrase_pattern(phrase: str) -> re.Pattern[str] | None:
    # Dictionary entries go through the same normalizer as the text, so
    # "ci/cd" is searched as "ci cd".
    normalized = normalize_text(phrase)
    if not normalized:
        return None
    return re.compile(rf"\b{re.escape(normalized)}\b")


def extract_phrases(normalized_text: str, phrases: Iterable[str]) -> PhraseExtraction:
    """Pull dictionary phrases out of already-normalized text.

    Phrases are checked in the given order against the text left over by the
    previous ones, so when two entries overlap the one listed first keeps the
    span. Each occurrence is reported once, under its dictionary spelling, and
    blanked to a single space so the token classifier never sees it again.
    """
    remaining = normalized_text or ""
    found: list[str] = []

    for phrase in phrases:
        pattern = _phrase_pattern(phrase)
        if pattern is None:
            continue
        hits = len(pattern.findall(remaining))
        if not hits:
            continue
        found.extend([phrase.lower()] * hits)
        remaining = pattern.sub(" ", remaining)

    return PhraseExtraction(phrases=found, remaining_text=remaining)
