# src/force_tracker/llms/config.py

import os
from dataclasses import dataclass
from typing import Literal

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "openai/gpt-3.5-turbo"
APP_TITLE = "Force Skill Tracker"


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for chat-completion clients.

    Immutable. Explicit. Nothing is read from the environment unless
    `from_env` is called.
    """

    provider: Literal["openrouter", "openai"]
    model: str = DEFAULT_MODEL
    api_key: str | None = None
    base_url: str | None = None  # Provider default when None
    timeout: float = 30.0
    max_retries: int = 3
    referer: str | None = None  # OpenRouter attribution header

    @classmethod
    def from_env(cls, model: str = DEFAULT_MODEL) -> "LLMConfig":
        """Build an OpenRouter config from `OPENROUTER_API_KEY` / `OPENROUTER_BASE_URL`.

        Returns a config with `api_key=None` when the key is unset; the quiz
        clients then fall back to template questions.
        """
        return cls(
            provider="openrouter",
            model=model,
            api_key=os.environ.get("OPENROUTER_API_KEY") or None,
            base_url=os.environ.get("OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
            referer=os.environ.get("OPENROUTER_REFERER") or None,
        )
