"""
Pytest configuration and fixtures for Casework Coach tests.
"""

import asyncio
import os
import tempfile
from unittest.mock import MagicMock

import pytest

# Set test environment before importing casework modules
os.environ["CASEWORK_ENV"] = "development"
os.environ["CASEWORK_LOG_PROMPTS"] = "0"
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="casework-test-")
for key in (
    "OPENAI_API_KEY",
    "PERPLEXITY_API_KEY",
    "TWO_ONE_ONE_API_KEY",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
):
    os.environ[key] = ""
os.environ.pop("PLAYBOOKS_PATH", None)


def run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio needed)."""
    return asyncio.run(coro)


def playbook_record(
    id: str,
    crisis_type: str,
    urgency: str,
    script: str = "Hi [Client Name], this is [Your Name].",
    **overrides,
) -> dict:
    """A valid playbook dict; override any field by keyword."""
    record = {
        "id": id,
        "domain": "Test",
        "triggers": {"crisis_type": crisis_type, "urgency": urgency},
        "action": f"Action for {id}",
        "script": script,
        "resource_link": "tel:211",
        "resource_label": "Call 211",
        "button_type": "call",
        "rationale": "Because it helps.",
        "compassion_note": "You are doing good work.",
    }
    record.update(overrides)
    return record


@pytest.fixture
def mock_supabase():
    """Mock Supabase client for unit tests."""
    mock_client = MagicMock()

    # Mock table operations
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.update.return_value = mock_table
    mock_table.delete.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.order.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    mock_client.table.return_value = mock_table

    return mock_client


@pytest.fixture
def housing_table():
    """Table with a single housing/high playbook."""
    from casework.engine import PlaybookTable

    return PlaybookTable.from_records([
        playbook_record("housing-high", "housing", "high"),
    ])


@pytest.fixture
def knowledge_data():
    """Organizational knowledge file contents."""
    return {
        "organization": {
            "name": "Test Recovery Center",
            "location": "Hastings, NE 68901",
            "mission": "Help people recover",
            "philosophy": "Compassion first",
        },
        "internal_resources": [
            {
                "name": "Emergency Housing Fund",
                "type": "housing",
                "description": "One-time rent assistance",
                "contact": "Front desk",
                "eligibility": "Active clients",
            },
            {
                "name": "Peer Group",
                "type": "support",
                "description": "Weekly peer recovery meeting",
                "contact": "Group lead",
                "eligibility": "Anyone",
            },
        ],
        "local_partnerships": [
            {
                "organization": "Crossroads Mission",
                "services": "Emergency shelter and meals",
                "contact": "402-555-0100",
                "notes": "Call before 5pm",
            },
            {
                "organization": "Workforce Center",
                "services": "Job placement",
                "contact": "402-555-0199",
            },
        ],
        "best_practices": {
            "housing": ["Start with immediate safety", "Document every contact"],
            "relapse_prevention": ["Review triggers weekly"],
        },
        "common_referral_paths": {
            "housing": {"immediate": ["Crossroads Mission"], "long_term": ["Housing authority"]},
        },
        "staff_contacts": {
            "supervisor": {
                "name": "Pat Lee",
                "phone": "402-555-0111",
                "email": "pat@example.org",
                "hours": "9-5",
            },
        },
        "community_specific_info": {
            "68901": {"transit": "Hastings Area Transit", "notes": "Winter shelter opens in November"},
        },
    }


@pytest.fixture
def knowledge_store(tmp_path, knowledge_data):
    """KnowledgeStore backed by a temporary knowledge file."""
    import json

    from casework.knowledge import KnowledgeStore

    path = tmp_path / "organizational-knowledge.json"
    path.write_text(json.dumps(knowledge_data), encoding="utf-8")
    return KnowledgeStore(path)
