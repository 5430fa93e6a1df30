# /app/services/groq_service.py

"""
Client for the text-completion provider (Groq's OpenAI-compatible chat
completions endpoint).

The HTTP call itself is a blocking `requests.post`; `complete()` runs it on a
worker thread so callers can await it alongside other provider calls.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import requests

from app.core.config import ProviderSettings
from app.core.exceptions import ConfigurationError, UpstreamProviderError

REQUEST_TIMEOUT_SECONDS = 60


@dataclass
class CompletionResult:
    text: str
    finish_reason: str


class GroqClient:
    def __init__(self, api_key: Optional[str], api_url: str, model: str):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "GroqClient":
        return cls(
            api_key=settings.groq_api_key,
            api_url=settings.groq_api_url,
            model=settings.groq_model,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _build_payload(
        self,
        user_message: str,
        system_message: Optional[str],
        temperature: float,
        max_tokens: int,
        json_mode: bool,
    ) -> dict:
        messages = []
        if system_message:
            messages.append({"role": "system", "content": system_message})
        messages.append({"role": "user", "content": user_message})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    def _post(self, payload: dict) -> dict:
        try:
            response = requests.post(
                self.api_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json=payload,
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.exceptions.RequestException as e:
            print(f"ERROR in GroqClient transport: {e}")
            raise UpstreamProviderError("Text generation provider is unreachable") from e

        if not response.ok:
            print(f"ERROR in GroqClient: HTTP {response.status_code}: {response.text[:500]}")
            raise UpstreamProviderError(f"Text generation provider returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamProviderError("Text generation provider returned a non-JSON body") from e

    async def complete(
        self,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        json_mode: bool = False,
    ) -> CompletionResult:
        """
        Sends one system+user exchange and returns the first choice.

        Raises ConfigurationError when no API key is set and
        UpstreamProviderError on transport failures or non-2xx responses.
        Empty text is returned as-is; deciding whether that is an error is
        the caller's business.
        """
        if not self.is_configured:
            raise ConfigurationError("Groq API key is not configured")

        payload = self._build_payload(user_message, system_message, temperature, max_tokens, json_mode)
        data = await asyncio.to_thread(self._post, payload)

        if not isinstance(data, dict):
            raise UpstreamProviderError("Text generation provider returned an unexpected response")

        choices = data.get("choices") or []
        if not isinstance(choices, list):
            raise UpstreamProviderError("Text generation provider returned an unexpected response")
        choice = choices[0] if choices else {}
        if not isinstance(choice, dict):
            raise UpstreamProviderError("Text generation provider returned an unexpected response")

        message = choice.get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        text = content.strip() if isinstance(content, str) else ""
        finish_reason = choice.get("finish_reason") or "unknown"
        return CompletionResult(text=text, finish_reason=str(finish_reason))
