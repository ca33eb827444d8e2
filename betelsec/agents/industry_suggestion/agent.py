"""
IndustrySuggestionAgent Runner

Single-shot classification of a company description into one industry.
"""

import json
import logging
from typing import Sequence

from google.genai import types

from betelsec.agents.client import GeminiNotConfiguredError, get_gemini_client
from betelsec.agents.industry_suggestion.prompts import (
    INDUSTRY_SUGGESTION_SYSTEM_PROMPT,
    build_industry_response_schema,
    build_industry_suggestion_prompt,
)
from betelsec.config import settings
from betelsec.schemas.industry_suggestion import IndustrySuggestion
from betelsec.utils.constants import FULL_INDUSTRIES
from betelsec.utils.logging import preview

logger = logging.getLogger(__name__)


class IndustrySuggestionError(RuntimeError):
    """Raised when the classifier returns no usable industry."""


async def run_industry_suggestion_agent(
    company_description: str,
    industries: Sequence[str] = FULL_INDUSTRIES,
) -> IndustrySuggestion:
    """
    Ask Gemini for the best-fitting industry.

    Args:
        company_description: Free text typed by the prospect
        industries: Enumerated list offered to the model

    Returns:
        IndustrySuggestion. The value is NOT re-checked here; callers
        validate it against their own active list.

    Raises:
        IndustrySuggestionError: If the call fails or returns no industry.
    """
    logger.info(f"IndustrySuggestionAgent invoked, description='{preview(company_description)}'")

    try:
        client = get_gemini_client()
    except GeminiNotConfiguredError as e:
        raise IndustrySuggestionError(str(e)) from e

    config = types.GenerateContentConfig(
        system_instruction=INDUSTRY_SUGGESTION_SYSTEM_PROMPT,
        temperature=0.0,
        response_mime_type="application/json",
        response_schema=build_industry_response_schema(industries),
    )

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=build_industry_suggestion_prompt(company_description, industries),
            config=config,
        )
    except Exception as e:
        raise IndustrySuggestionError("Gemini request failed") from e

    response_text = (response.text or "").strip()
    if not response_text:
        raise IndustrySuggestionError("Failed to suggest an industry from the AI model.")

    try:
        result = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise IndustrySuggestionError("Failed to parse classifier response") from e

    industry = result.get("industry") if isinstance(result, dict) else None
    if not isinstance(industry, str) or not industry:
        raise IndustrySuggestionError("Failed to suggest an industry from the AI model.")

    logger.info(f"IndustrySuggestionAgent completed: industry='{industry}'")
    return IndustrySuggestion(industry=industry)
