from __future__ import annotations

from typing import Protocol

from .models import Vocabulary


class VocabularyProvider(Protocol):
    def get_vocabulary(self) -> Vocabulary:
        """Return the immutable reference data bundle."""
