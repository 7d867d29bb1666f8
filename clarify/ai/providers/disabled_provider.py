from clarify.ai.types import GenerationError


class DisabledGenerator:
    def __init__(self, reason: str = "Text generation is disabled."):
        self._reason = reason

    def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        raise GenerationError(self._reason, code="generator_disabled")
