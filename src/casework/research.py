"""
Casework Coach - Research.

Search-grounded research through Perplexity to back generated content with
current evidence. Research is an enhancement: any failure yields an empty
result so generation can continue without it.
"""

import logging
import re
from typing import Literal

from casework.llm.client import complete
from casework.models.records import ResearchResult

logger = logging.getLogger(__name__)

FocusArea = Literal["best_practices", "treatment_approaches", "crisis_intervention", "evidence_based"]

RESEARCH_SYSTEM_PROMPT = (
    "You are a research assistant for social workers and case managers. Provide concise, "
    "evidence-based information that is actionable and trauma-informed. Focus on practical "
    "guidance that can be immediately applied."
)

MAX_FINDINGS = 8
MAX_FALLBACK_SENTENCES = 5

_LIST_ITEM = re.compile(r"^[\d\-\*•][\.\):]?\s+")
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")


def build_research_query(topic: str, context: str | None = None, focus: FocusArea | None = None) -> str:
    if focus == "best_practices":
        query = (
            f"What are the current evidence-based best practices for {topic} in social work and "
            "case management? Focus on trauma-informed, client-centered approaches."
        )
    elif focus == "treatment_approaches":
        query = (
            f"What are effective treatment approaches and interventions for {topic}? Include "
            "evidence-based protocols and step-by-step guidance."
        )
    elif focus == "crisis_intervention":
        query = (
            f"What are critical crisis intervention strategies for {topic}? Include red flags, "
            "immediate actions, and safety considerations."
        )
    elif focus == "evidence_based":
        query = (
            f"What does current research say about {topic}? Include evidence-based interventions, "
            "outcomes, and professional guidelines."
        )
    else:
        query = (
            f"Provide evidence-based information about {topic} relevant to social work, "
            "case management, and trauma-informed care."
        )

    if context:
        query += f" Context: {context}"
    return query


def extract_key_findings(content: str) -> list[str]:
    """
    Pull list items out of a research answer.

    Numbered or bulleted lines longer than 10 characters count as findings
    (at most 8). Without any, the first few sentences are used instead.
    """
    findings = []
    for line in content.split("\n"):
        trimmed = line.strip()
        if _LIST_ITEM.match(trimmed):
            cleaned = _LIST_ITEM.sub("", trimmed, count=1)
            if len(cleaned) > 10:
                findings.append(cleaned)

    if not findings:
        sentences = _SENTENCE.findall(content)
        return [s.strip() for s in sentences[:MAX_FALLBACK_SENTENCES]]

    return findings[:MAX_FINDINGS]


async def research_topic(
    topic: str,
    context: str | None = None,
    focus: FocusArea | None = None,
) -> ResearchResult:
    """Research a topic; returns an empty result on any provider error."""
    query = build_research_query(topic, context, focus)

    try:
        content = await complete(
            task="research",
            system_prompt=RESEARCH_SYSTEM_PROMPT,
            user_prompt=query,
        )
    except Exception as e:
        logger.error(f"Research error for {topic!r}: {e}")
        return ResearchResult()

    return ResearchResult(summary=content, key_findings=extract_key_findings(content))


def format_research_for_prompt(research: ResearchResult) -> str:
    if research.is_empty:
        return ""

    lines = ["", "", "## CURRENT RESEARCH & EVIDENCE-BASED GUIDANCE", ""]
    if research.key_findings:
        lines.append("Key Evidence-Based Findings:")
        lines.extend(f"{i}. {finding}" for i, finding in enumerate(research.key_findings, start=1))

    lines.append("")
    lines.append(
        "**Important**: Incorporate these evidence-based insights into your recommendations where relevant."
    )
    return "\n".join(lines) + "\n"


async def research_case_need(need: str, urgency: str, context: str | None = None) -> ResearchResult:
    """Research a case need, focusing on crisis response for high urgency."""
    if urgency == "high":
        focus: FocusArea = "crisis_intervention"
    elif urgency == "low":
        focus = "evidence_based"
    else:
        focus = "best_practices"

    return await research_topic(need, context, focus)


async def research_skill_topic(skill_topic: str, context: str | None = None) -> ResearchResult:
    query = (
        f"Professional development and skill building for social workers and case managers: "
        f"{skill_topic}. What are effective learning strategies, exercises, and resources?"
    )
    return await research_topic(query, context, "evidence_based")


async def research_client_resource(topic: str, context: str | None = None) -> ResearchResult:
    query = (
        f"Self-help strategies and coping skills for {topic}. What are evidence-based techniques "
        "that individuals can use independently?"
    )
    return await research_topic(query, context, "evidence_based")
