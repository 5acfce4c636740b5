# src/force_tracker/llms/factory.py

from force_tracker.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import APP_TITLE, OPENROUTER_BASE_URL, LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create a chat-completion client from config.

    Args:
        config: LLM configuration specifying provider, model, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured LLMClient implementation.

    Raises:
        ValueError: If the provider is unknown, or OpenRouter has no API key.

    Example:
        >>> config = LLMConfig(provider="openrouter", api_key="sk-or-...")
        >>> client = create_llm_client(config)
        >>> response = await client.complete(messages=[...])
    """
    from .openai import OpenAILLMClient

    if config.provider == "openrouter":
        if not config.api_key:
            raise ValueError("OpenRouter requires an API key")

        headers = {"X-Title": APP_TITLE}
        if config.referer:
            headers["HTTP-Referer"] = config.referer

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url or OPENROUTER_BASE_URL,
            timeout=config.timeout,
            max_retries=config.max_retries,
            default_headers=headers,
            metrics_hook=metrics_hook,
        )

    if config.provider == "openai":
        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
