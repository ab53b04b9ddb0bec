"""
Case plan prompt content.

The plan is built from intake details, organizational knowledge, document
knowledge, and (when a ZIP code was given) local resource listings.
"""

from casework.models.records import CasePlanRequest

CASE_PLAN_SYSTEM_PROMPT = (
    "You are an expert social work assistant specializing in trauma-informed care and crisis "
    "intervention. You help create comprehensive, actionable case plans."
)

CASE_PLAN_SECTIONS = """\
**Please provide a comprehensive case plan that includes:**

1. **Identified Need(s)**: Clearly summarize the primary need(s) and any secondary concerns based on the information provided.

2. **Recommended Steps**: List 3-5 concrete, actionable steps to address or stabilize the situation. Each step should be:
   - Specific and trauma-informed
   - Prioritized by urgency
   - Realistic and achievable
   - Include who should take the action (caseworker, client, or both)

3. **Local Resources**{zip_note}: {resource_instruction}
   - Type of resource (hotline, shelter, clinic, support group, etc.)
   - Brief description of how it helps
   - Contact information (phone, website) when available
{national_note}
4. **Risk Assessment**: Brief note on any immediate safety concerns or red flags

5. **Follow-up Timeline**: Suggest when the next check-in should occur

Format your response in clear, easy-to-read sections with bullet points. Use compassionate, professional language that honors the client's dignity. Be trauma-informed and culturally sensitive."""


def build_case_plan_prompt(
    request: CasePlanRequest,
    knowledge_context: str = "",
    document_context: str = "",
    local_resources: str = "",
    research_context: str = "",
) -> str:
    """Assemble the user prompt for case plan generation."""
    case_lines = [
        f"- Primary Need: {request.primary_need}",
        f"- Urgency Level: {request.urgency.value}",
    ]
    if request.client_initials:
        case_lines.append(f"- Client Initials: {request.client_initials}")
    if request.caseworker_name:
        case_lines.append(f"- Case Worker: {request.caseworker_name}")
    if request.zip_code:
        case_lines.append(f"- Location (ZIP): {request.zip_code}")
    if request.additional_context:
        case_lines.append(f"- Additional Context: {request.additional_context}")

    parts = [
        "You are an AI assistant helping social workers create comprehensive case plans for "
        "clients in crisis situations. Analyze the following case information and create a "
        f"detailed, actionable case plan.{knowledge_context}{document_context}{research_context}",
        "",
        "**Case Information:**",
        *case_lines,
        "",
    ]

    if local_resources:
        parts.append(f"**Local Resources Found (ZIP {request.zip_code}):**\n{local_resources}")
        resource_instruction = "Use the local resources found above and organize them by relevance to the case. Include:"
    else:
        resource_instruction = "Suggest relevant community resources, services, or organizations that could help. Include:"

    parts.append(
        CASE_PLAN_SECTIONS.format(
            zip_note=f" (for ZIP code {request.zip_code})" if request.zip_code else "",
            resource_instruction=resource_instruction,
            national_note="" if local_resources else "   - General national resources and hotlines\n",
        )
    )
    return "\n".join(parts)
