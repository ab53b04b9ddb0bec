"""
Casework Coach - Usage metrics and feedback.

Action logs record which recommendations were shown and whether they were
completed; the summary celebrates progress on the metrics page. Feedback
on generated content is appended to a JSONL file.
"""

import json
import logging
from collections import Counter
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from supabase import Client

from casework.db.client import get_action_logs, insert_action_log
from casework.models.actions import ActionLog, ActionRecommendation, MetricsSummary
from casework.models.records import Feedback

logger = logging.getLogger(__name__)


def summarize_actions(logs: Iterable[ActionLog]) -> MetricsSummary:
    """
    Aggregate action logs.

    completion_rate is a percentage; avg_feedback_score only averages logs
    that carry a score. Both are 0 when there is nothing to average.
    """
    logs = list(logs)
    if not logs:
        return MetricsSummary()

    completed = sum(1 for log in logs if log.completed is True)
    scores = [log.feedback_score for log in logs if log.feedback_score is not None]
    by_urgency = Counter(log.urgency.value for log in logs)

    return MetricsSummary(
        total_actions=len(logs),
        completion_rate=completed / len(logs) * 100,
        avg_feedback_score=sum(scores) / len(scores) if scores else 0.0,
        by_urgency=dict(by_urgency),
    )


def action_log_for(recommendation: ActionRecommendation) -> ActionLog:
    """Start a log entry for a recommendation that was just shown."""
    return ActionLog(
        timestamp=recommendation.timestamp,
        action_id=recommendation.id,
        crisis_type=recommendation.triggers.crisis_type,
        urgency=recommendation.triggers.urgency,
    )


def record_action(client: Client, caseworker_id: str, log: ActionLog) -> dict:
    """Persist an action log."""
    return insert_action_log(client, caseworker_id, log.model_dump(mode="json", exclude_none=True))


def load_summary(client: Client, caseworker_id: str) -> MetricsSummary:
    """Summary over every action logged by a caseworker."""
    rows = get_action_logs(client, caseworker_id)
    return summarize_actions(ActionLog.model_validate(row) for row in rows)


class FeedbackLog:
    """Append-only JSONL file of feedback entries."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def append(self, feedback: Feedback) -> None:
        entry = feedback.model_dump(exclude_none=True)
        entry["logged_at"] = datetime.now(UTC).isoformat()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

        logger.debug(f"Feedback logged for {feedback.content_type}")

    def entries(self) -> list[dict]:
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
