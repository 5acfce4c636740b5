# src/force_tracker/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from force_tracker.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Immutable. Stateless. Provider-agnostic.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Normalized chat-completion response.

    Provider details never leak outside the adapter.
    """

    content: str | None
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """Protocol for chat-completion clients.

    Design principles:
    - Stateless: Every call receives the full message list
    - Transport only: Retries only on network, rate-limit and 5xx errors
    - No behavior: Never inspects or repairs model output
    - No leakage: Provider objects and exceptions never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion.

        Args:
            messages: Complete conversation. No internal state.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens in the response.

        Returns:
            Normalized LLMResponse.

        Raises:
            LLMRequestError: On transport or HTTP failure after retries.
        """
        ...

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        ...
