from functools import lru_cache

from clarify.core.config import settings

from .local_vocabulary import LocalVocabulary
from .models import Vocabulary
from .provider import VocabularyProvider


@lru_cache(maxsize=1)
def get_default_vocabulary_provider() -> VocabularyProvider:
    return LocalVocabulary(settings.vocabulary_path)


def get_default_vocabulary() -> Vocabulary:
    return get_default_vocabulary_provider().get_vocabulary()


__all__ = [
    "Vocabulary",
    "VocabularyProvider",
    "LocalVocabulary",
    "get_default_vocabulary_provider",
    "get_default_vocabulary",
]
