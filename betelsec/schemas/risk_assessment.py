"""
Pydantic schemas for the risk assessment endpoints.

These models define the request/response contracts for briefing generation.
Request fields are loosely typed on purpose: field-level rules depend on the
form variant and are enforced by betelsec.services.form_variants so that
errors can be reported inline per field.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

VariantName = Literal["company_profile", "quantum_threats"]
BlockKind = Literal["bullet", "spacer", "paragraph"]


# ============================================================================
# REQUEST MODELS
# ============================================================================

class RiskAssessmentRequest(BaseModel):
    """
    Risk assessment form submission.

    Which fields are collected (and which are required) depends on the
    variant. `industry` is always required and must belong to the variant's
    enumerated industry list.
    """
    variant: VariantName = Field(
        "quantum_threats",
        description="Form variant that decides collected fields and briefing sections",
        examples=["quantum_threats", "company_profile"]
    )
    company_name: Optional[str] = Field(
        None,
        description="Name of the prospect's company",
        max_length=200,
        examples=["Acme Health"]
    )
    company_description: Optional[str] = Field(
        None,
        description="Free-text description of the company, its services and customers",
        max_length=2000
    )
    industry: str = Field(
        "",
        description="Industry, one of the variant's enumerated list",
        max_length=200,
        examples=["Healthcare"]
    )
    enterprise_size: Optional[str] = Field(
        None,
        description=(
            "small, medium or large. Any other value is accepted and handled "
            "as a large enterprise by the recommendation rules."
        ),
        max_length=50,
        examples=["small", "large"]
    )
    data_types: Optional[str] = Field(
        None,
        description="Sensitive data types handled by the company (min 10 characters)",
        max_length=2000,
        examples=["Patient medical records, billing data and lab results"]
    )


# ============================================================================
# DOMAIN MODELS
# ============================================================================

class ProductRecommendation(BaseModel):
    """A single product in the recommendation directive."""
    product: str = Field(..., description="Product code (PRISM, SYNAPSE, DSG)")
    framing: str = Field(..., description="Why the product is recommended")


class ProductRecommendationDirective(BaseModel):
    """
    Deterministic product decision derived from the company size.

    PRISM is always first. SYNAPSE and DSG follow only for small and medium
    companies; every other size gets PRISM plus a consultative deferral note.
    """
    requested_size: Optional[str] = Field(
        None, description="Enterprise size as submitted"
    )
    size_tier: Literal["small", "medium", "large"] = Field(
        ..., description="Size branch the rules resolved to"
    )
    always_include: List[str] = Field(default_factory=lambda: ["PRISM"])
    conditionally_include: List[str] = Field(default_factory=list)
    products: List[ProductRecommendation] = Field(
        ..., description="Ordered recommendations (PRISM first)"
    )
    elaboration_note: Optional[str] = Field(
        None, description="Deferral note, present only on the minimal branch"
    )

    @property
    def product_codes(self) -> List[str]:
        return [item.product for item in self.products]


class MarkdownBlock(BaseModel):
    """One rendered line of briefing markdown."""
    kind: BlockKind
    text: Optional[str] = None

    @classmethod
    def bullet(cls, text: str) -> "MarkdownBlock":
        return cls(kind="bullet", text=text)

    @classmethod
    def paragraph(cls, text: str) -> "MarkdownBlock":
        return cls(kind="paragraph", text=text)

    @classmethod
    def spacer(cls) -> "MarkdownBlock":
        return cls(kind="spacer")


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class BriefingSection(BaseModel):
    """One section of a generated briefing, raw and rendered."""
    key: str = Field(..., examples=["product_recommendations"])
    title: str = Field(..., examples=["Recommended BetelSec Solutions"])
    markdown: str
    blocks: List[MarkdownBlock]


class RiskBriefingResponse(BaseModel):
    """
    Generated risk briefing.

    Created per submission and never persisted.
    """
    variant: VariantName
    sections: List[BriefingSection]
    directive: ProductRecommendationDirective


class FieldError(BaseModel):
    """Inline validation error for a single form field."""
    field: str
    message: str


class FormValidationErrorResponse(BaseModel):
    """Body returned with HTTP 422 when the form fails validation."""
    error: Literal["validation_error"] = "validation_error"
    details: List[FieldError]


class FormVariantResponse(BaseModel):
    """Form variant description used by the front end to build the form."""
    name: VariantName
    fields: List[str]
    required_fields: List[str]
    industries: List[str]
    output_keys: List[str]
    collects_enterprise_size: bool
