"""
Skill-building and client handout prompt content.

Skill resources are written for the worker; client resources are handouts
the worker gives to the client, so they address the client directly.
"""

from casework.models.records import ResourceType, SkillResourceRequest
from casework.models.knowledge import Organization

SKILL_RESOURCE_SYSTEM_PROMPT = (
    "You are an expert in social work education, professional development, and evidence-based "
    "practice. You create high-quality, practical learning materials that support caseworkers "
    "and social workers in developing their skills. Your resources are trauma-informed, "
    "culturally responsive, and grounded in research."
)

CLIENT_RESOURCE_SYSTEM_PROMPT = (
    "You are a compassionate social worker who creates client-facing self-help materials. "
    "Your materials are written DIRECTLY TO the client (not about them), using simple language, "
    "warm tone, and practical exercises that clients can use on their own between sessions."
)

RESOURCE_TYPE_INSTRUCTIONS: dict[ResourceType, str] = {
    ResourceType.WORKSHEET: "Create an interactive worksheet with exercises, reflection questions, and practical activities.",
    ResourceType.READING: "Create a comprehensive reading material with key concepts, theories, and evidence-based practices.",
    ResourceType.EXERCISE: "Create a practical exercise or activity with step-by-step instructions and reflection prompts.",
    ResourceType.ANY: "Create the most appropriate resource type (worksheet, reading material, or exercise) based on the topic and context.",
}

PRACTICAL_APPLICATION: dict[ResourceType, list[str]] = {
    ResourceType.WORKSHEET: ["Reflection questions", "Self-assessment items", "Goal-setting exercises", "Action planning template"],
    ResourceType.READING: ["Key takeaways", "Discussion questions", "Further reading suggestions"],
    ResourceType.EXERCISE: ["Step-by-step instructions", "Guided practice scenarios", "Reflection prompts", "Implementation checklist"],
    ResourceType.ANY: ["Interactive elements", "Reflection questions", "Practical exercises", "Action steps"],
}

CLIENT_HANDOUT_SECTIONS = """\
**CREATE A CLIENT HANDOUT WITH THESE SECTIONS:**

1. **Why This Matters**: 2-3 warm, hopeful sentences on why working on this helps them
2. **Think About It**: 3-5 open, non-judgmental reflection questions
3. **Things You Can Try**: 2-3 exercises they can do alone in 5-15 minutes, step by step
4. **Your Daily Practice**: ONE 1-2 minute habit
5. **When Things Get Hard**: 3-4 in-the-moment coping techniques
6. **Words of Encouragement**: 3-5 strength-based affirmations
7. **Tracking Your Progress**: a simple weekly question or rating
8. **When to Reach Out for Help**: clear signs to contact their worker, and permission to ask

**FORMATTING:** clear headings, bullet points, 8th grade reading level, no clinical jargon, warm friend-like tone."""


def build_skill_resource_prompt(
    request: SkillResourceRequest,
    organization: Organization,
    best_practices: str = "",
) -> str:
    """Assemble the user prompt for a worker skill-building resource."""
    application = "\n".join(f"   - {item}" for item in PRACTICAL_APPLICATION[request.resource_type])
    worker = f"\n**Social Worker:** {request.worker_name}\n" if request.worker_name else ""

    return f"""You are a professional development specialist for social workers and case managers at {organization.name}. Our mission: {organization.mission}. Our philosophy: {organization.philosophy}

Create a high-quality, evidence-based learning resource to help develop professional skills.

**Topic/Skill to Address:**
{request.skill_topic}
{worker}
**Context & Situation:**
{request.context}{best_practices}

**Resource Type:**
{RESOURCE_TYPE_INSTRUCTIONS[request.resource_type]}

**Please create a comprehensive professional development resource that includes:**

1. **Introduction & Learning Objectives**
2. **Core Content** - evidence-based, trauma-informed, culturally responsive strategies with real-world examples
3. **Practical Application**
{application}
4. **Resources & Next Steps** - readings, professional communities, self-care reminders

Use clear headings, bullet points, and accessible professional language. Make it immediately usable."""


def build_client_resource_prompt(request: SkillResourceRequest, best_practices: str = "") -> str:
    """Assemble the user prompt for a client-facing handout."""
    situation = ""
    if request.context:
        situation = f"\n**What the worker told us about the client's situation:**\n{request.context}\n"

    return f"""A social worker needs a self-help resource to GIVE TO THEIR CLIENT to help the client work on: "{request.skill_topic}".{best_practices}
{situation}
**YOUR TASK:**
Create a client-facing handout the WORKER can give to the CLIENT. Write directly to the client ("you" language), keep it simple, and focus on what the client can do on their own. Be encouraging and empowering, not clinical or preachy.

{CLIENT_HANDOUT_SECTIONS}"""
