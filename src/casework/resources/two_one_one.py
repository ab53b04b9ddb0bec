"""
Casework Coach - Local resource search.

Looks up local services through the 211 National Data Platform Search V2
keyword API. When no API key is configured, the API fails, or it returns
nothing, an LLM is asked for known local resources instead.

The 211 API takes keywords/location as query params but locationMode,
distance, size, and orderByDistance as headers.
"""

import logging
import re
from typing import Any

import httpx

from casework.config import settings
from casework.llm.client import complete

logger = logging.getLogger(__name__)

SEARCH_DISTANCE_MILES = 25
PAGE_SIZE = 10
MAX_LISTED = 8
MAX_DESCRIPTION = 200
REQUEST_TIMEOUT = 15.0

_HTML_TAG = re.compile(r"<[^>]*>")

FALLBACK_SYSTEM_PROMPT = (
    "You are a resource finder with knowledge of 211 databases and local social services. "
    "Provide real, verifiable local resources with contact information based on your training data."
)


def format_211_results(results: list[dict[str, Any]]) -> str:
    """Render 211 search results as a numbered markdown list (first 8)."""
    lines: list[str] = []

    for index, result in enumerate(results[:MAX_LISTED], start=1):
        org_name = result.get("nameOrganization") or "Resource"
        service_name = result.get("nameService") or ""
        description = result.get("descriptionService") or result.get("descriptionOrganization") or ""
        description = _HTML_TAG.sub("", description)

        lines.append(f"{index}. **{org_name}**")

        if service_name and service_name != org_name:
            lines.append(f"   - Service: {service_name}")

        if description:
            snippet = description[:MAX_DESCRIPTION].strip()
            ellipsis = "..." if len(description) > MAX_DESCRIPTION else ""
            lines.append(f"   - {snippet}{ellipsis}")

        address = result.get("address") or {}
        parts = [
            address.get(key)
            for key in ("streetAddress", "city", "stateProvince", "postalCode")
            if address.get(key)
        ]
        if parts:
            lines.append(f"   - Address: {', '.join(parts)}")

        lines.append("")

    return "\n".join(lines) + "\n" if lines else ""


async def search_with_llm(zip_code: str, need: str) -> str:
    """Ask the LLM for local resources. Returns "" on failure."""
    try:
        return await complete(
            task="resource_search",
            system_prompt=FALLBACK_SYSTEM_PROMPT,
            user_prompt=(
                f'Find 5-8 real local resources for "{need}" in ZIP code {zip_code}. Include '
                "organization names, phone numbers, websites if available, physical addresses, and "
                "brief descriptions of services. Format as a numbered list with clear contact "
                "details. Focus on verified organizations like United Way 211, local nonprofits, "
                "government services, hospitals, and community centers."
            ),
        )
    except Exception as e:
        logger.error(f"Error with AI resource search: {e}")
        return ""


async def search_211(zip_code: str, need: str, api_key: str, client: httpx.AsyncClient) -> str | None:
    """
    Query the 211 API.

    Returns formatted listings, or None when the API errors or finds nothing.
    """
    try:
        response = await client.get(
            settings.two_one_one_url,
            params={"keywords": need, "location": zip_code},
            headers={
                "Api-Key": api_key,
                "locationMode": "Near",
                "distance": str(SEARCH_DISTANCE_MILES),
                "size": str(PAGE_SIZE),
                "orderByDistance": "true",
            },
        )
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"211 API error: {e.response.status_code} {e.response.text[:500]}")
        return None
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Error searching 211 resources: {e}")
        return None

    results = data.get("results") or []
    if not results:
        logger.info("No 211 results found")
        return None

    logger.info(f"Found {data.get('count', len(results))} resources from 211, showing {min(MAX_LISTED, len(results))}")
    return format_211_results(results)


async def search_local_resources(
    zip_code: str | None,
    need: str,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Find local resources for a need near a ZIP code.

    Args:
        zip_code: Postal code to search around; empty means no search
        need: Free-text need (e.g. "housing")
        client: HTTP client to use (one is created when omitted)

    Returns:
        Markdown listing, or "" when nothing could be found
    """
    if not zip_code:
        return ""

    api_key = settings.two_one_one_api_key
    if not api_key:
        logger.info("No 211 API key found, using AI fallback")
        return await search_with_llm(zip_code, need)

    if client is None:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as owned_client:
            listing = await search_211(zip_code, need, api_key, owned_client)
    else:
        listing = await search_211(zip_code, need, api_key, client)

    if listing is None:
        return await search_with_llm(zip_code, need)
    return listing
