from __future__ import annotations

import os
from typing import Optional

from openai import OpenAI

from clarify.ai.types import GenerationError


class OpenAIGenerator:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 20.0,
        max_retries: int = 0,
        temperature: float = 0.2,
        max_output_tokens: int = 900,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise GenerationError("OPENAI_API_KEY is missing", code="generator_disabled")

        self._client = OpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s,
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        create_kwargs = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
            "max_tokens": self._max_output_tokens,
        }
        if json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self._client.chat.completions.create(**create_kwargs)
        except Exception as exc:  # noqa: BLE001 - SDK raises many transport/API error types
            raise GenerationError(f"OpenAI request failed: {exc}", code="generator_error") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise GenerationError("OpenAI returned an empty response", code="empty_response")
        return str(content).strip()
