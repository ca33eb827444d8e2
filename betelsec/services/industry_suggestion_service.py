"""
Industry Suggestion Service

Wraps the IndustrySuggestionAgent with the membership check every caller
needs: a suggestion is only usable if it belongs to the caller's active
enumerated industry list.
"""

import logging
from typing import Optional, Sequence

from betelsec.agents.industry_suggestion import run_industry_suggestion_agent
from betelsec.schemas.industry_suggestion import IndustrySuggestion
from betelsec.utils.constants import FULL_INDUSTRIES

logger = logging.getLogger(__name__)


async def suggest_industry(
    company_description: str,
    industries: Sequence[str] = FULL_INDUSTRIES,
) -> Optional[IndustrySuggestion]:
    """
    Suggest an industry for a company description.

    Args:
        company_description: Free text typed by the prospect
        industries: Active enumerated list

    Returns:
        IndustrySuggestion if the classifier's answer is in `industries`,
        None otherwise (foreign values are dropped silently).

    Raises:
        IndustrySuggestionError: If the classifier call fails. Callers log it
            and carry on; it is never shown to the user.
    """
    suggestion = await run_industry_suggestion_agent(company_description, industries)

    if suggestion.industry not in industries:
        logger.info(f"Dropping suggestion outside the active list: '{suggestion.industry}'")
        return None

    return suggestion
