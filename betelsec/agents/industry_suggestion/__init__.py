"""
IndustrySuggestionAgent Package

Classifies a free-text company description into one enumerated industry.

Usage:
    from betelsec.agents.industry_suggestion import run_industry_suggestion_agent

    suggestion = await run_industry_suggestion_agent("We build EV batteries...")
"""

from betelsec.agents.industry_suggestion.agent import (
    IndustrySuggestionError,
    run_industry_suggestion_agent,
)
from betelsec.agents.industry_suggestion.prompts import (
    INDUSTRY_SUGGESTION_SYSTEM_PROMPT,
    build_industry_response_schema,
    build_industry_suggestion_prompt,
)

__all__ = [
    "run_industry_suggestion_agent",
    "IndustrySuggestionError",
    "INDUSTRY_SUGGESTION_SYSTEM_PROMPT",
    "build_industry_response_schema",
    "build_industry_suggestion_prompt",
]
