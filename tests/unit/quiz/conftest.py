import pytest

from force_tracker.llms.base import LLMResponse, Usage
from force_tracker.observability.base import NoOpMetricsHook


class FakeLLM:
    """Scripted LLM: returns `content` or raises `error`, recording each call."""

    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict] = []
        self.closed = False
        self.metrics_hook = NoOpMetricsHook()

    async def complete(self, *, messages, temperature=0.0, max_tokens=None) -> LLMResponse:
        self.calls.append(
            {"messages": messages, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            finish_reason="stop",
            usage=Usage(prompt_tokens=100, completion_tokens=50, total_tokens=150),
            latency_ms=12.0,
        )

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_llm_factory():
    return FakeLLM
