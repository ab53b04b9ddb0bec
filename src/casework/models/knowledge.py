"""
Casework Coach - Knowledge base models.

These mirror data/organizational-knowledge.json. Extra keys are kept so
anything staff add through the admin editor survives a save.
"""

from pydantic import BaseModel, ConfigDict, Field


class _KnowledgeModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Organization(_KnowledgeModel):
    name: str
    location: str
    mission: str
    philosophy: str


class InternalResource(_KnowledgeModel):
    id: str | None = None
    name: str
    type: str
    description: str
    contact: str
    eligibility: str
    categories: list[str] | None = None


class LocalPartnership(_KnowledgeModel):
    id: str | None = None
    organization: str
    services: str
    contact: str
    address: str | None = None
    location: str | None = None
    notes: str = ""
    categories: list[str] | None = None


class TreatmentProtocol(_KnowledgeModel):
    id: str | None = None
    name: str
    category: str
    description: str
    steps: list[str] = Field(default_factory=list)
    contraindications: list[str] | None = None
    timeframe: str | None = None


class ClinicalGuideline(_KnowledgeModel):
    id: str | None = None
    name: str
    category: str
    situation: str
    guidance: list[str] = Field(default_factory=list)


class ReferralPath(_KnowledgeModel):
    immediate: list[str] | None = None
    short_term: list[str] | None = None
    long_term: list[str] | None = None


class StaffContact(_KnowledgeModel):
    name: str
    phone: str
    email: str
    hours: str


class ClientDocument(_KnowledgeModel):
    id: str | None = None
    name: str
    location: str
    required_for: str


class KnowledgeBase(_KnowledgeModel):
    """The whole organizational knowledge file."""

    organization: Organization
    internal_resources: list[InternalResource] = Field(default_factory=list)
    local_partnerships: list[LocalPartnership] = Field(default_factory=list)
    best_practices: dict[str, list[str]] = Field(default_factory=dict)
    treatment_protocols: list[TreatmentProtocol] | None = None
    clinical_guidelines: list[ClinicalGuideline] | None = None
    common_referral_paths: dict[str, ReferralPath] = Field(default_factory=dict)
    staff_contacts: dict[str, StaffContact] = Field(default_factory=dict)
    client_forms_documents: list[ClientDocument] = Field(default_factory=list)
    community_specific_info: dict[str, dict[str, str]] = Field(default_factory=dict)


DEFAULT_ORGANIZATION = Organization(
    name="Next Right Step Recovery",
    location="Hastings, NE 68901",
    mission="Trauma-informed recovery support and case management",
    philosophy="Compassion in the chaos. Accountability without shame.",
)


def default_knowledge_base() -> KnowledgeBase:
    """Minimal knowledge base used when the JSON file is missing."""
    return KnowledgeBase(organization=DEFAULT_ORGANIZATION)
