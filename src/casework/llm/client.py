"""
Casework Coach - LLM Client.

Wraps the OpenAI SDK for free-text generation. Perplexity exposes an
OpenAI-compatible API, so the same SDK talks to both providers; the model
router decides which one a task uses.

All LLM calls go through complete() for consistent logging.
"""

import logging

from openai import AsyncOpenAI

from casework.config import settings
from casework.errors import ConfigurationError
from casework.llm.model_router import Provider, get_task_config
from casework.llm.prompt_logger import log_prompt

logger = logging.getLogger(__name__)

PERPLEXITY_BASE_URL = "https://api.perplexity.ai"

# Singleton client instances, one per provider
_clients: dict[str, AsyncOpenAI] = {}


def get_client(provider: Provider = "openai") -> AsyncOpenAI:
    """
    Get the client for a provider.

    Raises:
        ConfigurationError: If the provider's API key is not set
    """
    if provider not in _clients:
        if provider == "perplexity":
            if not settings.perplexity_api_key:
                raise ConfigurationError(
                    "Perplexity API key is required. Set PERPLEXITY_API_KEY environment variable."
                )
            _clients[provider] = AsyncOpenAI(
                api_key=settings.perplexity_api_key,
                base_url=PERPLEXITY_BASE_URL,
            )
        else:
            if not settings.openai_api_key:
                raise ConfigurationError(
                    "OpenAI API key is required. Set OPENAI_API_KEY environment variable."
                )
            _clients[provider] = AsyncOpenAI(api_key=settings.openai_api_key)

    return _clients[provider]


def reset_clients() -> None:
    """Drop cached clients (after settings change, or in tests)."""
    _clients.clear()


async def complete(
    *,
    task: str,
    system_prompt: str,
    user_prompt: str,
    model_override: str | None = None,
) -> str:
    """
    Generate text for a task.

    Args:
        task: Task name for model selection (see model_router.TASK_CONFIGS)
        system_prompt: System message setting the assistant's role
        user_prompt: The request, including any knowledge context
        model_override: Use this model instead of the task default

    Returns:
        The generated text ("" if the provider returned no content)

    Example:
        plan = await complete(
            task="case_plan",
            system_prompt="You are an expert social work assistant...",
            user_prompt=prompt,
        )
    """
    config = get_task_config(task)
    provider = config.pop("provider", "openai")
    default_model = config.pop("model", "gpt-4o-mini")
    model = model_override or default_model

    client = get_client(provider)

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=config.get("temperature", 0.5),
            max_tokens=config.get("max_tokens", 1024),
        )
        text = ""
        if response.choices:
            text = response.choices[0].message.content or ""

        log_prompt(
            task=task,
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response=text,
            config=config,
        )
        return text

    except Exception as e:
        log_prompt(
            task=task,
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            error=str(e),
            config=config,
        )
        logger.error(f"LLM call failed for {task} ({provider}/{model}): {e}")
        raise
