"""
Casework Coach - Local resource search (211 with LLM fallback).
"""

from casework.resources.two_one_one import format_211_results, search_local_resources

__all__ = [
    "format_211_results",
    "search_local_resources",
]
