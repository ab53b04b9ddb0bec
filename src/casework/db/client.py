"""
Casework Coach - Supabase Client.

Low-level database access. All queries go through here.

Two kinds of client:
- Service client (service role key): token validation and server-side jobs
- Authenticated client (anon key + user JWT): per-request access under RLS
"""

from typing import Any

from supabase import Client, create_client

from casework.config import settings
from casework.errors import ConfigurationError

# Singleton service client
_service_client: Client | None = None


def _require(value: str | None, name: str) -> str:
    if not value:
        raise ConfigurationError(f"{name} is required. Set it in the environment or .env.")
    return value


def get_service_client() -> Client:
    """
    Get the service-role Supabase client.

    Uses singleton pattern to reuse connection.
    """
    global _service_client

    if _service_client is None:
        _service_client = create_client(
            _require(settings.supabase_url, "SUPABASE_URL"),
            _require(settings.supabase_service_role_key, "SUPABASE_SERVICE_ROLE_KEY"),
        )

    return _service_client


def get_authenticated_client(access_token: str) -> Client:
    """Get a client that acts as the user who owns `access_token`."""
    client = create_client(
        _require(settings.supabase_url, "SUPABASE_URL"),
        _require(settings.supabase_anon_key, "SUPABASE_ANON_KEY"),
    )
    client.postgrest.auth(access_token)
    return client


# =============================================================================
# Client Operations
# =============================================================================


def get_clients(client: Client) -> list[dict]:
    """Get the caseworker's clients, newest first."""
    response = client.table("clients").select("*").order("created_at", desc=True).execute()
    return response.data


def add_client(client: Client, user_id: str, initials: str) -> dict:
    """Add a client record. Initials are stored uppercased."""
    data = {"initials": initials.strip().upper(), "user_id": user_id}
    response = client.table("clients").insert(data).execute()
    return response.data[0]


# =============================================================================
# Case Plan Operations
# =============================================================================


def save_case_plan(
    client: Client,
    caseworker_id: str,
    content: str,
    primary_need: str,
    urgency: str,
    input_data: dict[str, Any],
) -> dict:
    """Persist a generated case plan."""
    data = {
        "content": content,
        "primary_need": primary_need,
        "urgency": urgency,
        "caseworker_id": caseworker_id,
        "input_data": input_data,
        "status": "Not Started",
    }
    response = client.table("case_plans").insert(data).execute()
    return response.data[0]


def get_recent_case_plans(client: Client, limit: int = 5) -> list[dict]:
    """Most recent case plans with the client's initials joined in."""
    response = (
        client.table("case_plans")
        .select("*, client:clients(initials)")
        .order("created_at", desc=True)
        .limit(limit)
        .execute()
    )
    return response.data


# =============================================================================
# Saved Resource Operations
# =============================================================================


def save_resource(
    client: Client,
    caseworker_id: str,
    content: str,
    topic: str,
    resource_type: str | None,
    category: str,
) -> dict:
    """Persist a generated skill-building or client resource."""
    data = {
        "content": content,
        "topic": topic,
        "resource_type": resource_type,
        "caseworker_id": caseworker_id,
        "category": category,
    }
    response = client.table("saved_resources").insert(data).execute()
    return response.data[0]


# =============================================================================
# Todo Operations
# =============================================================================


def get_todos(client: Client) -> list[dict]:
    response = client.table("todos").select("*").order("created_at", desc=True).execute()
    return response.data


def add_todo(client: Client, task: str) -> dict:
    response = client.table("todos").insert({"task": task.strip()}).execute()
    return response.data[0]


def set_todo_complete(client: Client, todo_id: int, is_complete: bool) -> dict | None:
    response = client.table("todos").update({"is_complete": is_complete}).eq("id", todo_id).execute()
    return response.data[0] if response.data else None


def delete_todo(client: Client, todo_id: int) -> None:
    client.table("todos").delete().eq("id", todo_id).execute()


# =============================================================================
# Action Log Operations
# =============================================================================


def insert_action_log(client: Client, caseworker_id: str, log: dict[str, Any]) -> dict:
    data = {"caseworker_id": caseworker_id, **log}
    response = client.table("action_logs").insert(data).execute()
    return response.data[0]


def get_action_logs(client: Client, caseworker_id: str) -> list[dict]:
    response = client.table("action_logs").select("*").eq("caseworker_id", caseworker_id).execute()
    return response.data
