"""
Casework Coach - Prompt content for generated case plans and resources.
"""

from casework.prompts.case_plan import CASE_PLAN_SYSTEM_PROMPT, build_case_plan_prompt
from casework.prompts.resources import (
    CLIENT_RESOURCE_SYSTEM_PROMPT,
    SKILL_RESOURCE_SYSTEM_PROMPT,
    build_client_resource_prompt,
    build_skill_resource_prompt,
)

__all__ = [
    "CASE_PLAN_SYSTEM_PROMPT",
    "CLIENT_RESOURCE_SYSTEM_PROMPT",
    "SKILL_RESOURCE_SYSTEM_PROMPT",
    "build_case_plan_prompt",
    "build_client_resource_prompt",
    "build_skill_resource_prompt",
]
