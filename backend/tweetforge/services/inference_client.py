"""HTTP client for the third-party inference (chat agent) service."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests

from tweetforge.core.config import Settings
from tweetforge.core.errors import ConfigurationError, UpstreamError

LOGGER = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Generate a viral, engaging tweet about: {topic}. \n"
    "Make it concise, impactful, and optimized for maximum engagement on Twitter/X. \n"
    "Keep it under 280 characters. Do not use hashtags unless absolutely necessary.\n"
    "Just return the tweet text, nothing else."
)


@dataclass(frozen=True)
class InferenceConfig:
    api_url: str
    api_key: str
    user_id: str
    agent_id: str
    session_id: str
    timeout: float = 120.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "InferenceConfig":
        """Validate the credentials once; raises ConfigurationError listing what is missing."""
        api_key = settings.LYZR_API_KEY.get_secret_value() if settings.LYZR_API_KEY else ""
        values = {
            "LYZR_API_KEY": api_key,
            "LYZR_USER_ID": settings.LYZR_USER_ID,
            "LYZR_AGENT_ID": settings.LYZR_AGENT_ID,
            "LYZR_SESSION_ID": settings.LYZR_SESSION_ID,
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(f"Missing inference configuration: {', '.join(missing)}")
        return cls(
            api_url=settings.LYZR_API_URL,
            api_key=api_key,
            user_id=settings.LYZR_USER_ID,
            agent_id=settings.LYZR_AGENT_ID,
            session_id=settings.LYZR_SESSION_ID,
            timeout=settings.INFERENCE_TIMEOUT_SECONDS,
        )


class InferenceClient:
    def __init__(self, config: InferenceConfig) -> None:
        self.config = config

    @staticmethod
    def build_prompt(topic: str) -> str:
        return PROMPT_TEMPLATE.format(topic=topic)

    def build_payload(self, prompt: str) -> Dict[str, str]:
        return {
            "user_id": self.config.user_id,
            "agent_id": self.config.agent_id,
            "session_id": self.config.session_id,
            "message": prompt,
        }

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "x-api-key": self.config.api_key}

    def complete(self, prompt: str) -> Any:
        """POST the prompt once and return the decoded JSON body. No retries."""
        try:
            res = requests.post(
                self.config.api_url,
                json=self.build_payload(prompt),
                headers=self._headers(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            LOGGER.error("❌ Inference request failed: %s", exc)
            raise UpstreamError(f"request to {self.config.api_url} failed: {exc}") from exc

        if not res.ok:
            LOGGER.error("❌ Inference API error: %s %s", res.status_code, res.text)
            raise UpstreamError(f"POST {self.config.api_url} -> {res.status_code}; body={res.text}")

        try:
            return res.json()
        except ValueError as exc:
            LOGGER.error("❌ Inference API returned non-JSON body: %r", res.text[:200])
            raise UpstreamError("inference response is not valid JSON") from exc
