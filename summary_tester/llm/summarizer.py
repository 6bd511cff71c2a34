"""Article summarization against Anthropic or OpenAI-compatible chat APIs.

Model routing
-------------
OpenAI-format models (``gpt-*``, ``o1*``, ``o3*``, ``gemini-*``)
    Sent through ``langchain_openai.ChatOpenAI`` to ``{ANTHROPIC_BASE_URL}/v1``,
    which is expected to be an OpenAI-compatible proxy such as LiteLLM.

Everything else (Claude models)
    Posted directly to the Anthropic Messages API at
    ``{ANTHROPIC_BASE_URL}/v1/messages``.

Both paths share the same user message and return a :class:`Summary` with
usage normalised to ``{"input_tokens": ..., "output_tokens": ...}``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import httpx
from langchain_core.messages import HumanMessage, SystemMessage

from summary_tester.config import settings

USER_PREFIX = "Fasse folgenden Artikel zusammen:\n\n"

_OPENAI_PREFIXES = ("gpt-", "o1", "o3", "gemini-")
_REASONING_PREFIX = "gpt-5"
_REASONING_MIN_TOKENS = 16384
_DEFAULT_MAX_TOKENS = 1024
_ANTHROPIC_VERSION = "2023-06-01"


class SummarizationError(Exception):
    """The model API returned an error payload or an empty answer."""


@dataclass
class Summary:
    summary: str
    model: str
    usage: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def is_openai_format(model: str) -> bool:
    """Return ``True`` if *model* is served through the OpenAI chat format."""
    return model.startswith(_OPENAI_PREFIXES)


# ---------------------------------------------------------------------------
# Provider implementations
# ---------------------------------------------------------------------------

def _get_chat_model(model: str, max_tokens: int, temperature: float) -> Any:
    """Return a LangChain chat model bound to the OpenAI-compatible proxy."""
    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=model,
        base_url=f"{settings.llm_base_url}/v1",
        api_key=settings.llm_api_key or "unset",
        max_tokens=max_tokens,
        temperature=temperature,
        timeout=settings.llm_timeout,
    )


def _summarize_openai(
    text: str, system_prompt: str, model: str, max_tokens: int, temperature: float
) -> Summary:
    if model.startswith(_REASONING_PREFIX):
        # Reasoning tokens count against the budget before any visible output.
        max_tokens = max(max_tokens, _REASONING_MIN_TOKENS)

    llm = _get_chat_model(model, max_tokens, temperature)
    message = llm.invoke(
        [SystemMessage(content=system_prompt), HumanMessage(content=USER_PREFIX + text)]
    )

    content = message.content if isinstance(message.content, str) else ""
    if not content.strip():
        raise SummarizationError(f"Modell {model} hat leere Antwort geliefert")

    usage = message.usage_metadata or {}
    return Summary(
        summary=content,
        model=message.response_metadata.get("model_name", model),
        usage={
            "input_tokens": usage.get("input_tokens", 0),
            "output_tokens": usage.get("output_tokens", 0),
        },
    )


def _summarize_anthropic(
    text: str, system_prompt: str, model: str, max_tokens: int, temperature: float
) -> Summary:
    with httpx.Client(timeout=settings.llm_timeout) as client:
        response = client.post(
            f"{settings.llm_base_url}/v1/messages",
            headers={
                "x-api-key": settings.llm_api_key,
                "Authorization": f"Bearer {settings.llm_api_key}",
                "anthropic-version": _ANTHROPIC_VERSION,
            },
            json={
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "system": system_prompt,
                "messages": [{"role": "user", "content": USER_PREFIX + text}],
            },
        )
    try:
        data = response.json()
    except ValueError as exc:
        response.raise_for_status()
        raise SummarizationError(f"Ungültige Antwort von {model}") from exc

    if data.get("error"):
        error = data["error"]
        detail = error.get("message") if isinstance(error, dict) else str(error)
        raise SummarizationError(f"API Fehler ({model}): {detail}")
    response.raise_for_status()

    blocks = [b.get("text", "") for b in data.get("content", []) if b.get("type") == "text"]
    content = "".join(blocks)
    if not content.strip():
        raise SummarizationError(f"Modell {model} hat leere Antwort geliefert")

    usage = data.get("usage") or {}
    return Summary(
        summary=content,
        model=data.get("model", model),
        usage={
            "input_tokens": usage.get("input_tokens", 0),
            "output_tokens": usage.get("output_tokens", 0),
        },
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize(
    text: str,
    system_prompt: str,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> Summary:
    """Summarize *text* with *system_prompt* on *model*.

    Args:
        text: The cleaned article text.
        system_prompt: The system prompt under test.
        model: Model name; defaults to ``settings.default_model``.
        max_tokens: Output token budget (default 1024; raised to 16384 for
            ``gpt-5*`` reasoning models).
        temperature: Sampling temperature (default 0.2 for OpenAI-format
            models, 0.3 for Anthropic models).

    Raises:
        SummarizationError: If the API reports an error or returns no text.
        httpx.HTTPError: On transport failures of the Anthropic path.
    """
    model = model or settings.default_model
    max_tokens = max_tokens or _DEFAULT_MAX_TOKENS

    if is_openai_format(model):
        return _summarize_openai(
            text, system_prompt, model, max_tokens, 0.2 if temperature is None else temperature
        )
    return _summarize_anthropic(
        text, system_prompt, model, max_tokens, 0.3 if temperature is None else temperature
    )
