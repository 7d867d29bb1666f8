import logging

from clarify.ai.config import load_ai_config
from clarify.ai.types import GenerationError, TextGenerator

from clarify.ai.providers.disabled_provider import DisabledGenerator
from clarify.ai.providers.gemini_provider import GeminiGenerator
from clarify.ai.providers.openai_provider import OpenAIGenerator

logger = logging.getLogger(__name__)


def get_text_generator() -> TextGenerator:
    cfg = load_ai_config()

    if cfg.provider == "disabled":
        return DisabledGenerator()

    try:
        if cfg.provider == "openai":
            return OpenAIGenerator(model=cfg.model, timeout_s=cfg.timeout_s)
        if cfg.provider == "gemini":
            return GeminiGenerator(model=cfg.model, timeout_s=cfg.timeout_s)
        raise GenerationError(f"Unsupported AI_PROVIDER='{cfg.provider}'", code="unknown_provider")
    except GenerationError as exc:
        logger.warning("text_generator_unavailable provider=%s code=%s: %s", cfg.provider, exc.code, exc)
        return DisabledGenerator(str(exc))
