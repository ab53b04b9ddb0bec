"""
Casework Coach - Decision engine.

Rule-based matching of case details to pre-authored playbooks.
"""

from casework.engine.matcher import ActionMatcher, crisis_types, personalize_script, select_action
from casework.engine.playbooks import PlaybookTable, get_default_table, load_playbooks

__all__ = [
    "ActionMatcher",
    "PlaybookTable",
    "crisis_types",
    "get_default_table",
    "load_playbooks",
    "personalize_script",
    "select_action",
]
