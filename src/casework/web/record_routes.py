"""
Record API endpoints.

Clients, saved case plans, and the caseworker's todo list. All routes act
as the authenticated caseworker, so row-level security scopes every query.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from casework.db import client as db
from casework.models.records import Client, Todo
from casework.web.auth import AuthenticatedUser, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"])


# =============================================================================
# Request Models
# =============================================================================


class NewClient(BaseModel):
    initials: str = Field(min_length=1, max_length=10)


class NewTodo(BaseModel):
    task: str = Field(min_length=1)


class TodoUpdate(BaseModel):
    is_complete: bool


# =============================================================================
# Clients
# =============================================================================


@router.get("/clients", response_model=list[Client])
async def list_clients(user: AuthenticatedUser = Depends(get_current_user)):
    client = db.get_authenticated_client(user.access_token)
    return db.get_clients(client)


@router.post("/clients", response_model=Client)
async def create_client(body: NewClient, user: AuthenticatedUser = Depends(get_current_user)):
    client = db.get_authenticated_client(user.access_token)
    return db.add_client(client, user.id, body.initials)


# =============================================================================
# Case Plans
# =============================================================================


@router.get("/case-plans")
async def recent_case_plans(
    limit: int = Query(5, ge=1, le=50),
    user: AuthenticatedUser = Depends(get_current_user),
) -> list[dict]:
    """Most recent case plans, each with its client's initials."""
    client = db.get_authenticated_client(user.access_token)
    return db.get_recent_case_plans(client, limit=limit)


# =============================================================================
# Todos
# =============================================================================


@router.get("/todos", response_model=list[Todo])
async def list_todos(user: AuthenticatedUser = Depends(get_current_user)):
    client = db.get_authenticated_client(user.access_token)
    return db.get_todos(client)


@router.post("/todos", response_model=Todo)
async def create_todo(body: NewTodo, user: AuthenticatedUser = Depends(get_current_user)):
    if not body.task.strip():
        raise HTTPException(status_code=422, detail="Task cannot be blank")
    client = db.get_authenticated_client(user.access_token)
    return db.add_todo(client, body.task)


@router.patch("/todos/{todo_id}", response_model=Todo)
async def update_todo(
    todo_id: int,
    body: TodoUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
):
    client = db.get_authenticated_client(user.access_token)
    row = db.set_todo_complete(client, todo_id, body.is_complete)
    if row is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return row


@router.delete("/todos/{todo_id}")
async def remove_todo(todo_id: int, user: AuthenticatedUser = Depends(get_current_user)) -> dict:
    client = db.get_authenticated_client(user.access_token)
    db.delete_todo(client, todo_id)
    logger.debug(f"Deleted todo {todo_id} for {user.id}")
    return {"success": True}
