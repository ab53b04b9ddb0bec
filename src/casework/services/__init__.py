"""
Casework Coach - Services.
"""

from casework.services.generation import (
    generate_case_plan,
    generate_client_resource,
    generate_skill_resource,
)

__all__ = [
    "generate_case_plan",
    "generate_client_resource",
    "generate_skill_resource",
]
