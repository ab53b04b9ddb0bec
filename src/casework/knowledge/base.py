"""
Casework Coach - Organizational knowledge base.

Backed by a single JSON file that staff edit through the admin UI.
Lookups are case-insensitive substring checks, so a
free-text need like "Housing" still finds "housing_crisis" practices.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from casework.models.knowledge import (
    InternalResource,
    KnowledgeBase,
    LocalPartnership,
    ReferralPath,
    StaffContact,
    default_knowledge_base,
)

logger = logging.getLogger(__name__)


def normalize_key(value: str) -> str:
    """'Housing Crisis' -> 'housing_crisis'."""
    return "_".join(value.lower().split())


class KnowledgeStore:
    """
    Loads, caches, and saves the knowledge base file.

    The cached snapshot is replaced wholesale on save, never mutated in place.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._cached: KnowledgeBase | None = None

    def load(self) -> KnowledgeBase:
        """Return the cached knowledge base, reading the file on first use."""
        if self._cached is not None:
            return self._cached

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self._cached = KnowledgeBase.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Could not load knowledge base from {self.path}, using defaults: {e}")
            return default_knowledge_base()

        return self._cached

    def reload(self) -> KnowledgeBase:
        self._cached = None
        return self.load()

    def save(self, kb: KnowledgeBase) -> None:
        """Write the knowledge base (pretty JSON) and swap the cache."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = kb.model_dump(mode="json", exclude_none=True)
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        self._cached = kb
        logger.info(f"Knowledge base saved to {self.path}")

    # =========================================================================
    # Lookups
    # =========================================================================

    def best_practices(self, category: str) -> list[str]:
        """Practices for a category: exact key first, then partial key match."""
        practices = self.load().best_practices
        normalized = normalize_key(category)

        if normalized in practices:
            return practices[normalized]

        for key, values in practices.items():
            if key in normalized or normalized in key:
                return values

        return []

    def internal_resources(self, kind: str | None = None) -> list[InternalResource]:
        resources = self.load().internal_resources
        if not kind:
            return resources

        needle = kind.lower()
        return [
            r for r in resources
            if needle in r.type.lower() or needle in r.description.lower()
        ]

    def local_partnerships(self, service: str | None = None) -> list[LocalPartnership]:
        partners = self.load().local_partnerships
        if not service:
            return partners

        needle = service.lower()
        return [p for p in partners if needle in p.services.lower()]

    def staff_contact(self, role: str) -> StaffContact | None:
        return self.load().staff_contacts.get(role)

    def community_info(self, location: str) -> dict[str, str] | None:
        return self.load().community_specific_info.get(normalize_key(location))

    def referral_paths(self, need: str) -> ReferralPath | None:
        return self.load().common_referral_paths.get(normalize_key(need))


_store: KnowledgeStore | None = None


def get_knowledge_store() -> KnowledgeStore:
    """Process-wide store for settings.knowledge_path."""
    global _store

    if _store is None:
        from casework.config import settings

        _store = KnowledgeStore(settings.knowledge_path)

    return _store
