"""
Casework Coach - Model Router.

Selects the provider, model, and sampling settings for each generation task.

Tasks:
- case_plan: Full case plan from intake details → gpt-4o-mini
- skill_resource: Worker professional-development material → gpt-4o-mini
- client_resource: Client-facing handout → Perplexity sonar (search-grounded)
- resource_search: Local resource listing when 211 is unavailable → gpt-4o-mini
- research: Evidence-based research summaries → Perplexity sonar
"""

from typing import Literal, TypedDict

Provider = Literal["openai", "perplexity"]


class ModelConfig(TypedDict, total=False):
    """Configuration for model calls."""

    provider: Provider
    model: str
    temperature: float
    max_tokens: int


# Perplexity model
SONAR = "sonar"  # search-optimized, cheapest

TASK_CONFIGS: dict[str, ModelConfig] = {
    "case_plan": {
        "provider": "openai",
        "model": "gpt-4o-mini",
        "temperature": 0.7,
        "max_tokens": 2048,
    },
    "skill_resource": {
        "provider": "openai",
        "model": "gpt-4o-mini",
        "temperature": 0.7,
        "max_tokens": 3000,
    },
    "client_resource": {
        "provider": "perplexity",
        "model": SONAR,
        "temperature": 0.7,
        "max_tokens": 2048,
    },
    "resource_search": {
        "provider": "openai",
        "model": "gpt-4o-mini",
        "temperature": 0.3,  # Factual listings
        "max_tokens": 800,
    },
    "research": {
        "provider": "perplexity",
        "model": SONAR,
        "temperature": 0.3,
        "max_tokens": 1000,
    },
}

# Default config if task not recognized
DEFAULT_CONFIG: ModelConfig = {
    "provider": "openai",
    "model": "gpt-4o-mini",
    "temperature": 0.5,
    "max_tokens": 1024,
}


def get_task_config(task: str) -> ModelConfig:
    """Get a copy of the model configuration for a task."""
    return TASK_CONFIGS.get(task, DEFAULT_CONFIG).copy()


def get_model(task: str) -> str:
    """Get the model name used for a task."""
    return get_task_config(task)["model"]
