"""
Casework Coach - Datastore records and generation payloads.

Row models map to the Supabase tables the app writes to. Request models are
the bodies accepted by the generation endpoints.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from casework.models.actions import UrgencyLevel


# =============================================================================
# Generation Requests
# =============================================================================


class CasePlanRequest(BaseModel):
    """Case details for a generated case plan."""

    primary_need: str
    urgency: UrgencyLevel
    client_initials: str | None = None
    caseworker_name: str | None = None
    zip_code: str | None = None
    additional_context: str | None = None
    include_research: bool = False  # Perplexity research pass before generation


class ResourceType(str, Enum):
    WORKSHEET = "worksheet"
    READING = "reading"
    EXERCISE = "exercise"
    ANY = "any"


class SkillResourceRequest(BaseModel):
    """Topic for a skill-building resource (worker) or handout (client)."""

    skill_topic: str
    context: str = ""
    worker_name: str | None = None
    resource_type: ResourceType = ResourceType.ANY
    include_research: bool = False


class GeneratedContent(BaseModel):
    """LLM output plus what produced it."""

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class ResearchResult(BaseModel):
    summary: str = ""
    key_findings: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.summary and not self.key_findings


# =============================================================================
# Datastore Rows
# =============================================================================


class Client(BaseModel):
    id: int
    initials: str
    user_id: str | None = None
    created_at: datetime | None = None


class SavedResourceCategory(str, Enum):
    SKILL_BUILDING = "skill-building"
    CLIENT_RESOURCE = "client-resource"


class Todo(BaseModel):
    id: int
    task: str
    is_complete: bool = False
    created_at: datetime | None = None


class Feedback(BaseModel):
    """Thumbs up/down (or free-text) feedback on generated content."""

    content_type: str = Field(min_length=1)
    feedback: str = Field(min_length=1)
    generated_content: str = Field(min_length=1)
    comment: str | None = None
    topic: str | None = None
