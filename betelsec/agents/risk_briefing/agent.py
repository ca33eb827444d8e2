"""
RiskBriefingAgent Runner

Single-shot structured generation. Sends one prompt to Gemini with the
variant's Pydantic response schema and returns the markdown sections.
"""

import json
import logging
from typing import Dict

from google.genai import types
from pydantic import ValidationError

from betelsec.agents.client import GeminiNotConfiguredError, get_gemini_client
from betelsec.agents.risk_briefing.prompts import RISK_BRIEFING_SYSTEM_PROMPT
from betelsec.agents.risk_briefing.types import BRIEFING_OUTPUT_MODELS
from betelsec.config import settings

logger = logging.getLogger(__name__)


class RiskBriefingGenerationError(RuntimeError):
    """Raised when the model returns no usable briefing."""


async def run_risk_briefing_agent(variant: str, user_prompt: str) -> Dict[str, str]:
    """
    Generate the briefing sections for a form variant.

    Args:
        variant: Form variant name (selects the response schema)
        user_prompt: Fully built user prompt including the product directive

    Returns:
        Dict mapping each section key of the variant to its markdown

    Raises:
        RiskBriefingGenerationError: If the model call fails or returns no
            structured output matching the schema.
    """
    output_model = BRIEFING_OUTPUT_MODELS[variant]
    logger.info(f"RiskBriefingAgent invoked for variant={variant}")

    try:
        client = get_gemini_client()
    except GeminiNotConfiguredError as e:
        raise RiskBriefingGenerationError(str(e)) from e

    config = types.GenerateContentConfig(
        system_instruction=RISK_BRIEFING_SYSTEM_PROMPT,
        temperature=0.4,
        max_output_tokens=4096,
        response_mime_type="application/json",
        response_schema=output_model,
    )

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=user_prompt,
            config=config,
        )
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}")
        raise RiskBriefingGenerationError("Gemini request failed") from e

    if not response.candidates or not response.candidates[0].content:
        logger.error("Empty response from Gemini API")
        raise RiskBriefingGenerationError(
            "Failed to generate a valid risk briefing from the AI model."
        )

    response_text = (response.text or "").strip()
    if not response_text:
        logger.error("Empty text in Gemini response")
        raise RiskBriefingGenerationError(
            "Failed to generate a valid risk briefing from the AI model."
        )

    try:
        briefing = output_model.model_validate(json.loads(response_text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid briefing payload from Gemini: {e}")
        logger.debug(f"Raw content: {response_text[:500]}")
        raise RiskBriefingGenerationError(
            "Failed to generate a valid risk briefing from the AI model."
        ) from e

    logger.info(f"RiskBriefingAgent completed: variant={variant}")
    return briefing.model_dump()
