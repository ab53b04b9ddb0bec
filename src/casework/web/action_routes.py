"""
Action API endpoints.

Next-best-action recommendations, crisis type options, action logging,
and the metrics summary.
"""

import logging

from fastapi import APIRouter, Depends

from casework.db.client import get_authenticated_client
from casework.engine import crisis_types, select_action
from casework.metrics import load_summary, record_action
from casework.models.actions import (
    ActionLog,
    ActionRecommendation,
    CaseInput,
    CrisisTypeOption,
    MetricsSummary,
)
from casework.web.auth import AuthenticatedUser, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["actions"])


@router.get("/crisis-types", response_model=list[CrisisTypeOption])
async def list_crisis_types() -> list[CrisisTypeOption]:
    """Crisis types for the intake form dropdown."""
    return crisis_types()


@router.post("/actions/next", response_model=ActionRecommendation)
async def next_action(case: CaseInput) -> ActionRecommendation:
    """
    Recommend the next best action for a case.

    Always returns a recommendation; unmatched cases get the
    escalate-to-supervisor action.
    """
    recommendation = select_action(case)
    logger.info(
        f"Recommended {recommendation.id} for "
        f"{case.crisis_type.value}/{case.urgency.value}"
    )
    return recommendation


@router.post("/actions/log")
async def log_action(
    log: ActionLog,
    user: AuthenticatedUser = Depends(get_current_user),
) -> dict:
    """Record that an action was shown, completed, or rated."""
    client = get_authenticated_client(user.access_token)
    row = record_action(client, user.id, log)
    return {"success": True, "id": row.get("id")}


@router.get("/metrics", response_model=MetricsSummary)
async def metrics_summary(user: AuthenticatedUser = Depends(get_current_user)) -> MetricsSummary:
    """Usage metrics for the current caseworker."""
    client = get_authenticated_client(user.access_token)
    return load_summary(client, user.id)
