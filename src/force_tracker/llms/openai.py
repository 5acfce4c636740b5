# src/force_tracker/llms/openai.py

import logging
from time import monotonic
from typing import Any, Literal

from openai import (
    NOT_GIVEN,
    APIConnectionError,
    AsyncOpenAI,
    InternalServerError,
    OpenAIError,
    RateLimitError,
)
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from force_tracker.errors import LLMRequestError
from force_tracker.observability import names
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, Message, Usage

logger = logging.getLogger(__name__)

# Timeouts are APIConnectionError subclasses.
TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)


class OpenAILLMClient(LLMClient):
    """Client for OpenAI-compatible chat-completion gateways (OpenAI, OpenRouter).

    Stateless. Transport-only retries. No behavior.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "openai/gpt-3.5-turbo",
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        default_headers: dict[str, str] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        # Retries are owned by tenacity below, not by the SDK.
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers=default_headers,
        )
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAILLMClient with model=%s, base_url=%s, timeout=%s",
            model,
            base_url or "default",
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()

        logger.debug("Calling chat completion: model=%s, messages=%d", self._model, len(messages))

        try:
            raw = await self._call_api(
                messages=self._convert_messages(messages),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL,
                labels={"model": self._model, "error": type(exc).__name__},
            )
            logger.warning("Chat completion failed: %s", exc)
            raise LLMRequestError(f"Chat completion failed: {exc}") from exc

        elapsed_ms = 1000 * (monotonic() - start)

        # Normalize immediately - provider objects never escape
        response = self._normalize_response(raw, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.LLM_REQUESTS_TOTAL, labels={"model": self._model}
        )
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "Chat completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )
        return response

    async def _call_api(
        self,
        *,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int | None,
    ) -> Any:
        """Call the completion endpoint with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(1, self._max_retries)),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                    max_tokens=max_tokens if max_tokens else NOT_GIVEN,  # type: ignore[arg-type]
                )

    def _convert_messages(self, messages: list[Message]) -> list[dict]:
        """Convert Message objects to the wire format.

        Internal only. Provider format never leaks outside.
        """
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """Normalize a chat-completion response to LLMResponse.

        This is the boundary. Raw provider objects stop here.
        """
        choice = raw.choices[0] if raw.choices else None

        finish_reason: Literal["stop", "length", "error"]
        if choice is not None and choice.finish_reason == "stop":
            finish_reason = "stop"
        elif choice is not None and choice.finish_reason == "length":
            finish_reason = "length"
        else:
            finish_reason = "error"

        usage = raw.usage
        return LLMResponse(
            content=choice.message.content if choice is not None else None,
            finish_reason=finish_reason,
            usage=Usage(
                prompt_tokens=usage.prompt_tokens if usage else 0,
                completion_tokens=usage.completion_tokens if usage else 0,
                total_tokens=usage.total_tokens if usage else 0,
            ),
            latency_ms=latency_ms,
        )

    async def aclose(self) -> None:
        await self._client.close()
