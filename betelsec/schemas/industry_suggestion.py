"""
Pydantic schemas for the industry suggestion endpoints.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from betelsec.schemas.risk_assessment import VariantName


class IndustrySuggestionRequest(BaseModel):
    """Free-text company description to classify."""
    company_description: str = Field(
        ...,
        description="Brief description of the company, its services and customers",
        min_length=1,
        max_length=2000,
        examples=["We run a chain of outpatient clinics and a telehealth app."]
    )
    variant: VariantName = Field(
        "company_profile",
        description="Variant whose industry list the suggestion must belong to"
    )


class IndustrySuggestion(BaseModel):
    """Classifier output, constrained to an enumerated industry list."""
    industry: str


class IndustrySuggestionResponse(BaseModel):
    """
    Suggestion result.

    `industry` is null when the classifier failed or returned a value
    outside the active list. Failures are never surfaced as errors.
    """
    industry: Optional[str] = None


class SuggestionMessage(BaseModel):
    """Message pushed over the suggestion WebSocket."""
    type: Literal["industry_suggestion"] = "industry_suggestion"
    industry: str
