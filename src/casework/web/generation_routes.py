"""
Generation API endpoints.

Case plans, skill-building resources, and client handouts. Output is saved
for authenticated caseworkers; a failed save never fails the request.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from casework.db.client import get_authenticated_client, save_case_plan, save_resource
from casework.models.records import (
    CasePlanRequest,
    GeneratedContent,
    SavedResourceCategory,
    SkillResourceRequest,
)
from casework.services import generate_case_plan, generate_client_resource, generate_skill_resource
from casework.web.auth import AuthenticatedUser, get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])


def _failure(what: str, error: Exception) -> JSONResponse:
    logger.error(f"Error generating {what}: {error}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": f"Failed to generate {what}: {error}"},
    )


def _success(result: GeneratedContent, saved_id: int | None = None) -> dict:
    return {
        "success": True,
        "content": result.content,
        "metadata": result.metadata,
        "saved_id": saved_id,
    }


@router.post("/generate-plan")
async def generate_plan(
    request: CasePlanRequest,
    user: AuthenticatedUser | None = Depends(get_optional_user),
):
    try:
        result = await generate_case_plan(request)
    except Exception as e:
        return _failure("case plan", e)

    saved_id = None
    if user:
        try:
            client = get_authenticated_client(user.access_token)
            row = save_case_plan(
                client,
                user.id,
                content=result.content,
                primary_need=request.primary_need,
                urgency=request.urgency.value,
                input_data=request.model_dump(mode="json"),
            )
            saved_id = row.get("id")
        except Exception as e:
            logger.warning(f"Failed to save case plan for {user.id}: {e}")

    return _success(result, saved_id)


async def _save_resource(
    user: AuthenticatedUser | None,
    result: GeneratedContent,
    request: SkillResourceRequest,
    category: SavedResourceCategory,
) -> int | None:
    if not user:
        return None
    try:
        client = get_authenticated_client(user.access_token)
        row = save_resource(
            client,
            user.id,
            content=result.content,
            topic=request.skill_topic,
            resource_type=request.resource_type.value,
            category=category.value,
        )
        return row.get("id")
    except Exception as e:
        logger.warning(f"Failed to save {category.value} resource for {user.id}: {e}")
        return None


@router.post("/generate-skill-resource")
async def skill_resource(
    request: SkillResourceRequest,
    user: AuthenticatedUser | None = Depends(get_optional_user),
):
    try:
        result = await generate_skill_resource(request)
    except Exception as e:
        return _failure("skill resource", e)

    saved_id = await _save_resource(user, result, request, SavedResourceCategory.SKILL_BUILDING)
    return _success(result, saved_id)


@router.post("/generate-client-resource")
async def client_resource(
    request: SkillResourceRequest,
    user: AuthenticatedUser | None = Depends(get_optional_user),
):
    try:
        result = await generate_client_resource(request)
    except Exception as e:
        return _failure("client resource", e)

    saved_id = await _save_resource(user, result, request, SavedResourceCategory.CLIENT_RESOURCE)
    return _success(result, saved_id)
