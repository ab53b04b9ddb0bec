"""
Casework Coach - Action Matcher.

Maps a case's crisis type and urgency to one recommended action:

1. Exact match on both trigger fields, first playbook in table order wins
2. Placeholders in the script are filled with the names supplied
3. No match -> fixed "Escalate to Supervisor" recommendation

The matcher never raises for valid inputs and has no side effects.
"""

from datetime import UTC, datetime

from casework.models.actions import (
    ActionRecommendation,
    ButtonType,
    CaseInput,
    CrisisTypeOption,
    CRISIS_TYPE_LABELS,
    Playbook,
    Triggers,
)
from casework.engine.playbooks import PlaybookTable, get_default_table

YOUR_NAME = "[Your Name]"
CLIENT_INITIALS = "[Client Initials]"
CLIENT_NAME = "[Client Name]"

ESCALATION_ID = "escalate-supervisor"
ESCALATION_SCRIPT = (
    "This situation needs team wisdom. Pause and connect with your supervisor "
    "or clinical lead for guidance."
)


def personalize_script(
    script: str,
    caseworker_name: str | None = None,
    client_initials: str | None = None,
) -> str:
    """
    Fill script placeholders with the names provided.

    Only the first occurrence of each token is replaced. Tokens whose value
    is missing stay in the text as-is.
    """
    if caseworker_name:
        script = script.replace(YOUR_NAME, caseworker_name, 1)
    if client_initials:
        script = script.replace(CLIENT_INITIALS, client_initials, 1)
        script = script.replace(CLIENT_NAME, client_initials, 1)
    return script


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def escalation_recommendation(triggers: Triggers) -> ActionRecommendation:
    """The fallback used when no playbook matches."""
    return ActionRecommendation(
        id=ESCALATION_ID,
        domain="Escalation",
        triggers=triggers,
        action="Escalate to Supervisor",
        script=ESCALATION_SCRIPT,
        personalized_script=ESCALATION_SCRIPT,
        resource_link="internal:supervisor-chat",
        resource_label="Contact Supervisor",
        button_type=ButtonType.LINK,
        rationale=(
            "When complexity exceeds playbook scope, collective wisdom ensures "
            "safety and quality care."
        ),
        compassion_note=(
            "Asking for help is strength, not weakness. Your client benefits "
            "from the team care."
        ),
        timestamp=_now_iso(),
    )


class ActionMatcher:
    """Rule-based next-best-action selection over an injected playbook table."""

    def __init__(self, table: PlaybookTable):
        self.table = table

    def find_playbook(self, triggers: Triggers) -> Playbook | None:
        """First playbook whose trigger pair equals `triggers`."""
        return self.table.lookup(triggers)

    def select_action(self, case: CaseInput) -> ActionRecommendation:
        triggers = Triggers(crisis_type=case.crisis_type, urgency=case.urgency)
        playbook = self.find_playbook(triggers)

        if playbook is None:
            return escalation_recommendation(triggers)

        return ActionRecommendation(
            **playbook.model_dump(),
            personalized_script=personalize_script(
                playbook.script,
                caseworker_name=case.caseworker_name,
                client_initials=case.client_initials,
            ),
            timestamp=_now_iso(),
        )


def select_action(case: CaseInput, table: PlaybookTable | None = None) -> ActionRecommendation:
    """Select an action using `table`, or the process-wide default table."""
    return ActionMatcher(table if table is not None else get_default_table()).select_action(case)


def crisis_types() -> list[CrisisTypeOption]:
    """All crisis types with display labels, in form order."""
    return [CrisisTypeOption(value=value, label=label) for value, label in CRISIS_TYPE_LABELS.items()]
