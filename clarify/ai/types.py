from typing import Protocol


class GenerationError(RuntimeError):
    def __init__(self, message: str, *, code: str = "generator_error"):
        super().__init__(message)
        self.code = code


class TextGenerator(Protocol):
    def complete(self, prompt: str, *, json_mode: bool = False) -> str: ...
