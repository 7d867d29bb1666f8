from __future__ import annotations

import os
from typing import Optional

from google import genai
from google.genai import types

from clarify.ai.types import GenerationError


class GeminiGenerator:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        timeout_s: float = 20.0,
        temperature: float = 0.2,
        max_output_tokens: int = 900,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or "").strip()
        if not key:
            raise GenerationError("GEMINI_API_KEY is missing", code="generator_disabled")

        # HttpOptions.timeout is in milliseconds.
        self._client = genai.Client(
            api_key=key,
            http_options=types.HttpOptions(timeout=int(timeout_s * 1000)),
        )

    def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        config = types.GenerateContentConfig(
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
            response_mime_type="application/json" if json_mode else None,
        )
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except Exception as exc:  # noqa: BLE001 - SDK raises transport and API error types
            raise GenerationError(f"Gemini request failed: {exc}", code="generator_error") from exc

        content = getattr(response, "text", None)
        if not content:
            raise GenerationError("Gemini returned an empty response", code="empty_response")
        return str(content).strip()
