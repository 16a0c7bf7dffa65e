"""OpenAI-compatible LLM client (Mistral API by default)."""
from __future__ import annotations

import json
import time
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from wikistral.config import settings
from wikistral.services import logger as log_service

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_client() -> Any:
    """Create an AsyncOpenAI client pointed at the configured endpoint."""
    from openai import AsyncOpenAI

    if not settings.llm_api_key:
        raise RuntimeError("LLM_API_KEY is not configured")
    base_url = settings.llm_base_url.strip() or "https://api.mistral.ai/v1"
    return AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=base_url,
    )


def get_model() -> str:
    """Get the model used for article text."""
    return settings.default_model


def get_facts_model() -> str:
    """Get the model used for infobox extraction."""
    override = settings.facts_model.strip()
    return override or settings.default_model


_client: Any | None = None


def client() -> Any:
    """Get or create the LLM client."""
    global _client
    if _client is None:
        _client = get_client()
    return _client


def _messages(prompt: str, system: str | None) -> list[dict[str, str]]:
    messages: list[dict[str, str]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})
    return messages


async def _complete(
    *,
    caller: str,
    model: str,
    messages: list[dict[str, str]],
    **extra: Any,
) -> str:
    started = time.monotonic()
    try:
        response = await client().chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
            **extra,
        )
    except Exception as exc:
        log_service.log_llm_call(
            model=model,
            caller=caller,
            duration_ms=int((time.monotonic() - started) * 1000),
            status="failed",
            error=str(exc),
        )
        raise

    usage = getattr(response, "usage", None)
    log_service.log_llm_call(
        model=model,
        caller=caller,
        input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
        output_tokens=getattr(usage, "completion_tokens", 0) or 0,
        duration_ms=int((time.monotonic() - started) * 1000),
    )

    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    return getattr(choices[0].message, "content", None) or ""


async def generate_text(prompt: str, *, system: str | None = None) -> str:
    """Generate free text for a prompt."""
    return await _complete(
        caller="generate_text",
        model=get_model(),
        messages=_messages(prompt, system),
    )


async def generate_object(
    prompt: str,
    schema: type[ModelT],
    *,
    system: str | None = None,
) -> ModelT:
    """Generate a record conforming to ``schema``.

    The JSON schema is appended to the system prompt and the model is asked for
    a JSON object. Raises ValueError when the reply does not validate.
    """
    schema_json = json.dumps(schema.model_json_schema(by_alias=True), ensure_ascii=False)
    schema_instruction = (
        "Respond with a single JSON object that conforms to this JSON schema:\n"
        f"{schema_json}"
    )
    full_system = f"{system}\n\n{schema_instruction}" if system else schema_instruction

    text = await _complete(
        caller=f"generate_object:{schema.__name__}",
        model=get_facts_model(),
        messages=_messages(prompt, full_system),
        response_format={"type": "json_object"},
    )
    try:
        return schema.model_validate_json(text)
    except ValidationError as exc:
        raise ValueError(f"Model reply does not match {schema.__name__}: {exc}") from exc
