# src/force_tracker/llms/__init__.py

"""Chat-completion client layer for force-tracker.

A thin, stateless abstraction over OpenAI-compatible gateways. Clients are
constructed explicitly and injected into the quiz clients.

Design principles:
- Stateless: Every call receives the full message list
- Transport only: Retries only on network, rate-limit and 5xx errors
- No behavior: Never inspects or repairs model output
- No leakage: Provider objects never escape the adapter

Example:
    >>> from force_tracker.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> config = LLMConfig.from_env()
    >>> client = create_llm_client(config)
    >>>
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
