"""
Casework Coach - Action models.

Closed vocabularies for crisis type, urgency, and resource buttons, plus the
playbook record, the per-submission case input, and the recommendation the
engine hands back.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CrisisType(str, Enum):
    """Category of client need or situation."""

    WITHDRAWAL = "withdrawal"
    ISOLATION = "isolation"
    FAMILY_CONFLICT = "family_conflict"
    RELAPSE_RISK = "relapse_risk"
    HOUSING = "housing"
    MENTAL_HEALTH = "mental_health"
    EMPLOYMENT = "employment"
    SPIRITUAL = "spiritual"
    REENTRY = "reentry"
    FOLLOWUP = "followup"

    @property
    def label(self) -> str:
        return CRISIS_TYPE_LABELS[self]


CRISIS_TYPE_LABELS: dict[CrisisType, str] = {
    CrisisType.WITHDRAWAL: "Acute Crisis - Withdrawal/Overdose",
    CrisisType.ISOLATION: "Isolation/Loneliness",
    CrisisType.FAMILY_CONFLICT: "Family Conflict",
    CrisisType.RELAPSE_RISK: "Relapse Risk",
    CrisisType.HOUSING: "Housing Instability",
    CrisisType.MENTAL_HEALTH: "Mental Health (Co-Occurring)",
    CrisisType.EMPLOYMENT: "Employment Barrier",
    CrisisType.SPIRITUAL: "Spiritual Disconnect",
    CrisisType.REENTRY: "Re-Entry Support",
    CrisisType.FOLLOWUP: "Follow-Up Check-In",
}


class UrgencyLevel(str, Enum):
    """Response priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ButtonType(str, Enum):
    """How the recommended resource is activated in the UI."""

    CALL = "call"
    TEXT = "text"
    SCHEDULE = "schedule"
    LINK = "link"


class Triggers(BaseModel):
    """Trigger pair a playbook responds to."""

    model_config = ConfigDict(frozen=True)

    crisis_type: CrisisType
    urgency: UrgencyLevel


class Playbook(BaseModel):
    """
    A pre-authored response template keyed by crisis type and urgency.

    `script` may contain the placeholders [Your Name], [Client Initials]
    and [Client Name].
    """

    model_config = ConfigDict(frozen=True)

    id: str
    domain: str
    triggers: Triggers
    action: str
    script: str
    resource_link: str
    resource_label: str
    button_type: ButtonType
    rationale: str
    compassion_note: str


class CaseInput(BaseModel):
    """One case submission from the intake form."""

    crisis_type: CrisisType
    urgency: UrgencyLevel
    client_initials: str | None = None
    caseworker_name: str | None = None
    zip_code: str | None = None
    additional_context: str | None = None


class ActionRecommendation(Playbook):
    """A playbook with its script personalized and a generation timestamp."""

    model_config = ConfigDict(frozen=True)

    personalized_script: str
    timestamp: str  # ISO-8601


class CrisisTypeOption(BaseModel):
    """Dropdown entry for the intake form."""

    value: CrisisType
    label: str


class ActionLog(BaseModel):
    """Usage record for a recommended action."""

    timestamp: str
    action_id: str
    crisis_type: CrisisType
    urgency: UrgencyLevel
    completed: bool | None = None
    feedback_score: float | None = Field(default=None, ge=1, le=5)
    feedback_notes: str | None = None


class MetricsSummary(BaseModel):
    """Aggregate usage metrics over a set of action logs."""

    total_actions: int = 0
    completion_rate: float = 0.0  # percent
    avg_feedback_score: float = 0.0
    by_urgency: dict[str, int] = Field(default_factory=dict)
