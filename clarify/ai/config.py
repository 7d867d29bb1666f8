import os
from dataclasses import dataclass

_DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "gemini": "gemini-2.5-flash",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    timeout_s: float


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    model = os.getenv("AI_MODEL", "").strip() or _DEFAULT_MODELS.get(provider, "")
    try:
        timeout_s = float(os.getenv("AI_TIMEOUT_S", "20"))
    except ValueError:
        timeout_s = 20.0
    return AIConfig(provider=provider, model=model, timeout_s=timeout_s)
