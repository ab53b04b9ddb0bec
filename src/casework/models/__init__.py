"""
Casework Coach - Models.
"""

from casework.models.actions import (
    CRISIS_TYPE_LABELS,
    ActionLog,
    ActionRecommendation,
    ButtonType,
    CaseInput,
    CrisisType,
    CrisisTypeOption,
    MetricsSummary,
    Playbook,
    Triggers,
    UrgencyLevel,
)
from casework.models.knowledge import KnowledgeBase, default_knowledge_base
from casework.models.records import (
    CasePlanRequest,
    Feedback,
    GeneratedContent,
    ResearchResult,
    ResourceType,
    SkillResourceRequest,
)

__all__ = [
    "CRISIS_TYPE_LABELS",
    "ActionLog",
    "ActionRecommendation",
    "ButtonType",
    "CaseInput",
    "CasePlanRequest",
    "CrisisType",
    "CrisisTypeOption",
    "Feedback",
    "GeneratedContent",
    "KnowledgeBase",
    "MetricsSummary",
    "Playbook",
    "ResearchResult",
    "ResourceType",
    "SkillResourceRequest",
    "Triggers",
    "UrgencyLevel",
    "default_knowledge_base",
]
