"""
Casework Coach - LLM Client.

Free-text generation through OpenAI and Perplexity.
"""

from casework.llm.client import complete, get_client
from casework.llm.model_router import get_model, get_task_config

__all__ = [
    "complete",
    "get_client",
    "get_model",
    "get_task_config",
]
