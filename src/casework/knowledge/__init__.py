"""
Casework Coach - Organizational knowledge.

Knowledge base JSON plus reference documents, both rendered into prompt context.
"""

from casework.knowledge.base import KnowledgeStore, get_knowledge_store, normalize_key
from casework.knowledge.context import format_best_practices, format_knowledge_context
from casework.knowledge.documents import DocumentLibrary, extract_text, get_document_library

__all__ = [
    "DocumentLibrary",
    "KnowledgeStore",
    "extract_text",
    "format_best_practices",
    "format_knowledge_context",
    "get_document_library",
    "get_knowledge_store",
    "normalize_key",
]
