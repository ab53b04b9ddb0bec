"""
Casework Coach - Playbook table.

The table is an ordered, immutable sequence of playbooks loaded from a JSON
array. Order matters: when several playbooks share a trigger pair, the
earliest one wins.
"""

import json
import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from casework.errors import PlaybookConfigError
from casework.models.actions import Playbook, Triggers

logger = logging.getLogger(__name__)


class PlaybookTable:
    """Read-only ordered collection of playbooks."""

    def __init__(self, playbooks: Iterable[Playbook]):
        self._playbooks: tuple[Playbook, ...] = tuple(playbooks)

        # Trigger pair -> earliest playbook for it
        self._index: dict[Triggers, Playbook] = {}
        for playbook in self._playbooks:
            self._index.setdefault(playbook.triggers, playbook)

    def __iter__(self) -> Iterator[Playbook]:
        return iter(self._playbooks)

    def __len__(self) -> int:
        return len(self._playbooks)

    def __getitem__(self, index: int) -> Playbook:
        return self._playbooks[index]

    def lookup(self, triggers: Triggers) -> Playbook | None:
        """First playbook in table order whose trigger pair equals `triggers`."""
        return self._index.get(triggers)

    def duplicate_triggers(self) -> list[Triggers]:
        """Trigger pairs claimed by more than one playbook, in first-seen order."""
        counts = Counter(p.triggers for p in self._playbooks)
        seen: list[Triggers] = []
        for playbook in self._playbooks:
            if counts[playbook.triggers] > 1 and playbook.triggers not in seen:
                seen.append(playbook.triggers)
        return seen

    @classmethod
    def from_records(cls, records: list[dict], *, strict: bool = False) -> "PlaybookTable":
        """
        Build a table from raw JSON records.

        Args:
            records: Playbook dicts in table order
            strict: Reject tables where a trigger pair appears more than once

        Raises:
            PlaybookConfigError: On malformed records, or duplicates when strict
        """
        if not isinstance(records, list):
            raise PlaybookConfigError("Playbook table must be a JSON array")

        playbooks = []
        for index, record in enumerate(records):
            try:
                playbooks.append(Playbook.model_validate(record))
            except ValidationError as e:
                raise PlaybookConfigError(f"Invalid playbook at index {index}: {e}") from e

        table = cls(playbooks)
        duplicates = table.duplicate_triggers()
        if duplicates:
            pairs = ", ".join(f"{t.crisis_type.value}/{t.urgency.value}" for t in duplicates)
            if strict:
                raise PlaybookConfigError(f"Duplicate playbook triggers: {pairs}")
            logger.debug(f"Playbook triggers shared by several entries (first wins): {pairs}")

        return table


def _default_table_text() -> str:
    return resources.files("casework.data").joinpath("playbooks.json").read_text(encoding="utf-8")


def load_playbooks(path: Path | str | None = None, *, strict: bool = False) -> PlaybookTable:
    """
    Load a playbook table from a JSON file.

    Args:
        path: JSON file to read; None reads the packaged default table
        strict: Fail on duplicate trigger pairs
    """
    try:
        text = Path(path).read_text(encoding="utf-8") if path else _default_table_text()
        records = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        raise PlaybookConfigError(f"Could not read playbook table {path or '(default)'}: {e}") from e

    return PlaybookTable.from_records(records, strict=strict)


@lru_cache
def get_default_table() -> PlaybookTable:
    """Table configured by PLAYBOOKS_PATH (or the packaged one), loaded once per process."""
    from casework.config import settings

    table = load_playbooks(settings.playbooks_path)
    logger.info(f"Loaded {len(table)} playbooks")
    return table
