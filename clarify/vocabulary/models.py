from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vocabulary:
    """Static reference data the matching engine reads but never mutates.

    ``phrases`` and ``weak_verbs`` keep their declared order: phrase extraction
    resolves overlaps by list position and weak-verb hits are reported in map
    order.
    """

    hard_skills: frozenset[str]
    soft_signals: frozenset[str]
    junk_tokens: frozenset[str]
    phrases: tuple[str, ...]
    weak_verbs: tuple[tuple[str, str], ...]

    @property
    def weak_verb_map(self) -> dict[str, str]:
        return dict(self.weak_verbs)
