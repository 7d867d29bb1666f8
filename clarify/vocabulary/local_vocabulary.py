from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Vocabulary
from .provider import VocabularyProvider

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("hard_skills", "soft_signals", "junk_tokens", "phrases", "weak_verbs")


class LocalVocabulary(VocabularyProvider):
    def __init__(self, vocabulary_path: str | Path | None = None) -> None:
        path = Path(vocabulary_path) if vocabulary_path else Path(__file__).with_name("vocabulary.yaml")
        self._vocabulary = self._load_vocabulary(path)

    @staticmethod
    def _load_vocabulary(path: Path) -> Vocabulary:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except OSError as exc:
            raise RuntimeError(f"Failed to read vocabulary '{path}': {exc}") from exc
        except yaml.YAMLError as exc:
            raise RuntimeError(f"Invalid YAML in vocabulary '{path}': {exc}") from exc

        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid vocabulary '{path}': expected a top-level mapping.")
        missing = [key for key in _REQUIRED_KEYS if key not in raw]
        if missing:
            raise RuntimeError(f"Invalid vocabulary '{path}': missing keys {', '.join(missing)}.")

        weak_verbs = raw["weak_verbs"]
        if not isinstance(weak_verbs, dict):
            raise RuntimeError(f"Invalid vocabulary '{path}': 'weak_verbs' must be a mapping.")

        hard_skills = _term_list(raw, "hard_skills", path)
        soft_signals = _term_list(raw, "soft_signals", path)
        # Single-term sets are looked up one whitespace token at a time.
        for key, terms in (("hard_skills", hard_skills), ("soft_signals", soft_signals)):
            multi_word = [term for term in terms if " " in term]
            if multi_word:
                logger.warning(
                    "vocabulary_unmatchable_terms path=%s section=%s count=%s terms=%s",
                    path,
                    key,
                    len(multi_word),
                    ", ".join(multi_word),
                )

        return Vocabulary(
            hard_skills=frozenset(hard_skills),
            soft_signals=frozenset(soft_signals),
            junk_tokens=frozenset(_term_list(raw, "junk_tokens", path)),
            phrases=tuple(_term_list(raw, "phrases", path)),
            weak_verbs=tuple(
                (str(weak).strip().lower(), str(strong).strip())
                for weak, strong in weak_verbs.items()
                if str(weak).strip()
            ),
        )

    def get_vocabulary(self) -> Vocabulary:
        return self._vocabulary


def _term_list(raw: dict[str, Any], key: str, path: Path) -> list[str]:
    values = raw[key]
    if not isinstance(values, list):
        raise RuntimeError(f"Invalid vocabulary '{path}': '{key}' must be a list.")
    terms: list[str] = []
    for value in values:
        term = str(value).strip().lower()
        if term and term not in terms:
            terms.append(term)
    return terms
