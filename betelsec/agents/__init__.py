"""
AI Components for the BetelSec risk assessment backend.

1. RiskBriefingAgent (Single-Shot Structured Generation)
   - Gemini with a per-variant response schema
   - Elaborates a product directive decided in code
     (betelsec/services/recommendation_engine.py)

2. IndustrySuggestionAgent (Single-Shot Classification)
   - Gemini constrained to an enumerated industry list

Both are plain Google Gen AI SDK calls sharing one lazily created client
(betelsec/agents/client.py). Neither writes anything anywhere.
"""

from betelsec.agents.industry_suggestion import (
    IndustrySuggestionError,
    run_industry_suggestion_agent,
)
from betelsec.agents.risk_briefing import (
    RiskBriefingGenerationError,
    run_risk_briefing_agent,
)

__all__ = [
    "run_risk_briefing_agent",
    "RiskBriefingGenerationError",
    "run_industry_suggestion_agent",
    "IndustrySuggestionError",
]
