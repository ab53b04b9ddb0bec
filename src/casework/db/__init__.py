"""
Casework Coach - Database Client.

Supabase access for clients, case plans, saved resources, todos, and action logs.
"""

from casework.db.client import get_authenticated_client, get_service_client

__all__ = [
    "get_authenticated_client",
    "get_service_client",
]
