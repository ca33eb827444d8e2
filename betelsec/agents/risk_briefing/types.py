"""
RiskBriefingAgent output models.

One Pydantic model per form variant. They are passed to Gemini as the
response schema, and their field names are the briefing's section keys.
Every field is a markdown string using "* " bullets.
"""

from typing import Dict, Type

from pydantic import BaseModel, Field


class CompanyProfileBriefing(BaseModel):
    """Briefing for the company profile form (name, industry, size)."""
    sensitive_data: str = Field(
        ...,
        description="Markdown list of the typical sensitive data for the industry."
    )
    threats: str = Field(
        ...,
        description=(
            "Markdown detailing likely threats, targeting frequency, and a "
            "real-world incident with its financial impact."
        )
    )
    product_recommendations: str = Field(
        ...,
        description="Markdown recommending BetelSec products per the directive."
    )


class QuantumThreatsBriefing(BaseModel):
    """Briefing for the quantum threats form (industry, data types)."""
    top_threats: str = Field(
        ...,
        description="Markdown list of the top quantum threats for the industry."
    )
    hndl_scenarios: str = Field(
        ...,
        description="Markdown 'Harvest Now, Decrypt Later' scenarios for the data types."
    )
    product_recommendations: str = Field(
        ...,
        description="Markdown recommending BetelSec products per the directive."
    )


BRIEFING_OUTPUT_MODELS: Dict[str, Type[BaseModel]] = {
    "company_profile": CompanyProfileBriefing,
    "quantum_threats": QuantumThreatsBriefing,
}
