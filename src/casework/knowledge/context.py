"""Render knowledge base entries as prompt context."""

from casework.knowledge.base import KnowledgeStore


def format_knowledge_context(
    store: KnowledgeStore,
    need: str | None = None,
    location: str | None = None,
) -> str:
    """
    Build the ORGANIZATIONAL CONTEXT block for an LLM prompt.

    Args:
        store: Knowledge store to read from
        need: Primary need; filters practices, resources, and partners
        location: Community key (e.g. a ZIP code or town name)
    """
    kb = store.load()
    org = kb.organization

    lines = [
        "",
        "",
        "## ORGANIZATIONAL CONTEXT",
        f"Organization: {org.name}",
        f"Location: {org.location}",
        f"Mission: {org.mission}",
        f"Philosophy: {org.philosophy}",
    ]

    if need:
        practices = store.best_practices(need)
        if practices:
            lines.append("")
            lines.append(f"### Best Practices for {need}:")
            lines.extend(f"- {practice}" for practice in practices)

    resources = store.internal_resources(need)
    if resources:
        lines.append("")
        lines.append("### Internal Resources Available:")
        for resource in resources:
            lines.append(f"- **{resource.name}** ({resource.type}): {resource.description}")
            lines.append(f"  Contact: {resource.contact}")
            lines.append(f"  Eligibility: {resource.eligibility}")

    partners = store.local_partnerships(need)
    if partners:
        lines.append("")
        lines.append("### Trusted Local Partners:")
        for partner in partners:
            lines.append(f"- **{partner.organization}**: {partner.services}")
            lines.append(f"  Contact: {partner.contact}")
            if partner.notes:
                lines.append(f"  Notes: {partner.notes}")

    if location:
        info = store.community_info(location)
        if info:
            lines.append("")
            lines.append("### Community-Specific Information:")
            for key, value in info.items():
                if key != "notes":
                    lines.append(f"- {key.replace('_', ' ')}: {value}")
            if info.get("notes"):
                lines.append("")
                lines.append(f"Important: {info['notes']}")

    return "\n".join(lines) + "\n"


def format_best_practices(store: KnowledgeStore, topic: str, heading: str | None = None) -> str:
    """Bulleted best practices for a topic, or "" when there are none."""
    practices = store.best_practices(topic)
    if not practices:
        return ""

    heading = heading or f"Organizational Best Practices for {topic}"
    body = "\n".join(f"- {practice}" for practice in practices)
    return f"\n**{heading}:**\n{body}\n"
