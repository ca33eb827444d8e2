"""
RiskBriefingAgent Package

Single-shot Gemini generation of markdown risk briefings.

Main Components:
- types: Pydantic response schemas, one per form variant
- prompts: System prompt, directive rendering and user prompt builders
- agent: Runner that calls Gemini and validates the structured output

Usage:
    from betelsec.agents.risk_briefing import run_risk_briefing_agent

    sections = await run_risk_briefing_agent("quantum_threats", prompt)
"""

from betelsec.agents.risk_briefing.agent import (
    RiskBriefingGenerationError,
    run_risk_briefing_agent,
)
from betelsec.agents.risk_briefing.prompts import (
    RISK_BRIEFING_SYSTEM_PROMPT,
    build_company_profile_prompt,
    build_directive_instructions,
    build_quantum_threats_prompt,
)
from betelsec.agents.risk_briefing.types import (
    BRIEFING_OUTPUT_MODELS,
    CompanyProfileBriefing,
    QuantumThreatsBriefing,
)

__all__ = [
    # Main runner
    "run_risk_briefing_agent",
    "RiskBriefingGenerationError",
    # Prompts
    "RISK_BRIEFING_SYSTEM_PROMPT",
    "build_company_profile_prompt",
    "build_directive_instructions",
    "build_quantum_threats_prompt",
    # Types
    "BRIEFING_OUTPUT_MODELS",
    "CompanyProfileBriefing",
    "QuantumThreatsBriefing",
]
