"""
Knowledge API endpoints.

Organizational knowledge base, reference documents, and feedback on
generated content. Edits require the admin PIN.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from casework.config import settings
from casework.errors import DocumentNotFoundError
from casework.knowledge import get_document_library, get_knowledge_store
from casework.knowledge.documents import DocumentMetadata
from casework.metrics import FeedbackLog
from casework.models.knowledge import KnowledgeBase
from casework.models.records import Feedback
from casework.web.auth import require_admin_pin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["knowledge"])


@router.get("/knowledge", response_model=KnowledgeBase)
async def get_knowledge() -> KnowledgeBase:
    return get_knowledge_store().load()


@router.put("/knowledge", dependencies=[Depends(require_admin_pin)])
async def update_knowledge(kb: KnowledgeBase) -> dict:
    """Replace the knowledge base."""
    try:
        get_knowledge_store().save(kb)
    except OSError as e:
        logger.error(f"Error saving knowledge base: {e}")
        raise HTTPException(status_code=500, detail="Failed to save knowledge base")
    return {"success": True}


@router.get("/documents", response_model=list[DocumentMetadata])
async def list_documents() -> list[DocumentMetadata]:
    return get_document_library().list_documents()


@router.delete("/documents/{doc_id}", dependencies=[Depends(require_admin_pin)])
async def delete_document(doc_id: str) -> dict:
    try:
        get_document_library().delete(doc_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}


@router.post("/log-feedback")
async def log_feedback(feedback: Feedback) -> dict:
    """Append feedback on generated content to the feedback log."""
    try:
        FeedbackLog(settings.feedback_log_path).append(feedback)
    except OSError as e:
        logger.error(f"Error logging feedback: {e}")
        raise HTTPException(status_code=500, detail="Failed to log feedback")
    return {"success": True}
