"""
Casework Coach - Content generation.

Case plans, worker skill-building resources, and client handouts. Each
service gathers context (knowledge base, documents, local resources,
research), builds the prompt, and calls the model the router assigns.
Provider errors propagate to the caller.
"""

import logging
from datetime import UTC, datetime

from casework.knowledge.base import KnowledgeStore, get_knowledge_store
from casework.knowledge.context import format_best_practices, format_knowledge_context
from casework.knowledge.documents import DocumentLibrary, get_document_library
from casework.llm.client import complete
from casework.llm.model_router import get_model
from casework.models.records import CasePlanRequest, GeneratedContent, SkillResourceRequest
from casework.prompts import (
    CASE_PLAN_SYSTEM_PROMPT,
    CLIENT_RESOURCE_SYSTEM_PROMPT,
    SKILL_RESOURCE_SYSTEM_PROMPT,
    build_case_plan_prompt,
    build_client_resource_prompt,
    build_skill_resource_prompt,
)
from casework.research import (
    format_research_for_prompt,
    research_case_need,
    research_client_resource,
    research_skill_topic,
)
from casework.resources import search_local_resources

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


async def generate_case_plan(
    request: CasePlanRequest,
    store: KnowledgeStore | None = None,
    library: DocumentLibrary | None = None,
) -> GeneratedContent:
    """Generate a case plan for one client situation."""
    store = store or get_knowledge_store()
    library = library or get_document_library()

    local_resources = ""
    if request.zip_code:
        local_resources = await search_local_resources(request.zip_code, request.primary_need)

    research_context = ""
    if request.include_research:
        research = await research_case_need(
            request.primary_need, request.urgency.value, request.additional_context
        )
        research_context = format_research_for_prompt(research)

    prompt = build_case_plan_prompt(
        request,
        knowledge_context=format_knowledge_context(store, request.primary_need, request.zip_code),
        document_context=library.document_knowledge(),
        local_resources=local_resources,
        research_context=research_context,
    )

    content = await complete(
        task="case_plan",
        system_prompt=CASE_PLAN_SYSTEM_PROMPT,
        user_prompt=prompt,
    )
    logger.info(f"Generated case plan ({len(content)} chars) for need={request.primary_need!r}")

    return GeneratedContent(
        content=content,
        metadata={
            "model": get_model("case_plan"),
            "urgency": request.urgency.value,
            "local_resources": bool(local_resources),
            "timestamp": _timestamp(),
        },
    )


async def generate_skill_resource(
    request: SkillResourceRequest,
    store: KnowledgeStore | None = None,
) -> GeneratedContent:
    """Generate a professional-development resource for a worker."""
    store = store or get_knowledge_store()
    organization = store.load().organization

    best_practices = format_best_practices(
        store, request.skill_topic, heading=f"{organization.name} Best Practices"
    )
    if request.include_research:
        research = await research_skill_topic(request.skill_topic, request.context or None)
        best_practices += format_research_for_prompt(research)

    prompt = build_skill_resource_prompt(request, organization, best_practices=best_practices)

    content = await complete(
        task="skill_resource",
        system_prompt=SKILL_RESOURCE_SYSTEM_PROMPT,
        user_prompt=prompt,
    )

    return GeneratedContent(
        content=content,
        metadata={
            "model": get_model("skill_resource"),
            "skill_topic": request.skill_topic,
            "resource_type": request.resource_type.value,
            "timestamp": _timestamp(),
        },
    )


async def generate_client_resource(
    request: SkillResourceRequest,
    store: KnowledgeStore | None = None,
) -> GeneratedContent:
    """Generate a self-help handout the worker gives to the client."""
    store = store or get_knowledge_store()

    best_practices = format_best_practices(store, request.skill_topic)
    if request.include_research:
        research = await research_client_resource(request.skill_topic, request.context or None)
        best_practices += format_research_for_prompt(research)

    prompt = build_client_resource_prompt(request, best_practices=best_practices)

    content = await complete(
        task="client_resource",
        system_prompt=CLIENT_RESOURCE_SYSTEM_PROMPT,
        user_prompt=prompt,
    )

    return GeneratedContent(
        content=content,
        metadata={
            "model": get_model("client_resource"),
            "topic": request.skill_topic,
            "timestamp": _timestamp(),
        },
    )
