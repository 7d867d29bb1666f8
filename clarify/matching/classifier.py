from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from clarify.schemas.analysis import KeywordCategory
from clarify.vocabulary import Vocabulary

Source = Literal["jd", "resume"]


@dataclass(slots=True)
class KeywordTally:
    text: str
    category: KeywordCategory
    count_in_jd: int = 0
    count_in_resume: int = 0


class KeywordAccumulator:
    """Occurrence counts per lower-cased term across both documents."""

    def __init__(self) -> None:
        self._entries: dict[str, KeywordTally] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, text: str) -> KeywordTally | None:
        return self._entries.get(text.lower())

    def track(self, text: str, category: KeywordCategory, source: Source) -> None:
        key = text.lower()
        entry = self._entries.get(key)
        if entry is None:
            # first spelling and category win
            entry = KeywordTally(text=text, category=category)
            self._entries[key] = entry
        if source == "jd":
            entry.count_in_jd += 1
        else:
            entry.count_in_resume += 1

    def jd_entries(self) -> list[KeywordTally]:
        return [entry for entry in self._entries.values() if entry.count_in_jd > 0]


def tokenize(remaining_text: str, junk_tokens: frozenset[str]) -> list[str]:
    return [token for token in (remaining_text or "").split() if token not in junk_tokens]


def classify_token(token: str, vocabulary: Vocabulary) -> KeywordCategory | None:
    if token in vocabulary.hard_skills:
        return KeywordCategory.HARD_SKILL
    if token in vocabulary.soft_signals:
        return KeywordCategory.SOFT_SIGNAL
    return None


def accumulate_tokens(
    accumulator: KeywordAccumulator,
    tokens: Iterable[str],
    source: Source,
    vocabulary: Vocabulary,
) -> None:
    for token in tokens:
        category = classify_token(token, vocabulary)
        if category is not None:
            accumulator.track(token, category, source)


def accumulate_phrases(accumulator: KeywordAccumulator, phrases: Iterable[str], source: Source) -> None:
    for phrase in phrases:
        accumulator.track(phrase, KeywordCategory.PHRASE, source)
