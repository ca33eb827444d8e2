"""
Risk Briefing Service

Orchestrates one briefing submission:
1. Validate the form against its variant (inline field errors)
2. Derive the product directive from the company size
3. Build the variant's prompt with the directive interpolated
4. Call the RiskBriefingAgent (single Gemini call, no retry)
5. Render every section through the markdown renderer

Briefings are request-scoped and never persisted.
"""

import logging

from betelsec.agents.risk_briefing import (
    RiskBriefingGenerationError,
    build_company_profile_prompt,
    build_quantum_threats_prompt,
    run_risk_briefing_agent,
)
from betelsec.schemas.risk_assessment import (
    BriefingSection,
    ProductRecommendationDirective,
    RiskAssessmentRequest,
    RiskBriefingResponse,
)
from betelsec.services.form_variants import (
    SECTION_TITLES,
    FormVariant,
    validate_request,
)
from betelsec.services.markdown_renderer import render_markdown
from betelsec.services.recommendation_engine import build_recommendation_directive

logger = logging.getLogger(__name__)


def build_briefing_prompt(
    request: RiskAssessmentRequest,
    variant: FormVariant,
    directive: ProductRecommendationDirective,
) -> str:
    """Build the user prompt for the request's variant."""
    if variant.name == "company_profile":
        return build_company_profile_prompt(
            company_name=(request.company_name or "").strip(),
            industry=request.industry,
            enterprise_size=request.enterprise_size,
            directive=directive,
        )
    return build_quantum_threats_prompt(
        industry=request.industry,
        data_types=(request.data_types or "").strip(),
        directive=directive,
    )


def build_briefing_sections(sections: dict, variant: FormVariant) -> list:
    """
    Render the generated markdown in the variant's section order.

    Raises:
        RiskBriefingGenerationError: If a section the variant expects is missing.
    """
    rendered = []
    for key in variant.output_keys:
        markdown = sections.get(key)
        if markdown is None:
            logger.error(f"Generated briefing is missing section '{key}'")
            raise RiskBriefingGenerationError(f"Missing briefing section: {key}")
        rendered.append(BriefingSection(
            key=key,
            title=SECTION_TITLES[key],
            markdown=markdown,
            blocks=render_markdown(markdown),
        ))
    return rendered


async def generate_risk_briefing(request: RiskAssessmentRequest) -> RiskBriefingResponse:
    """
    Generate a risk briefing for a form submission.

    Args:
        request: Form submission (variant decides which fields apply)

    Returns:
        RiskBriefingResponse with rendered sections and the directive used

    Raises:
        FormValidationError: If any collected field is invalid
        RiskBriefingGenerationError: If the model returned no usable output
    """
    variant = validate_request(request)
    logger.info(f"generate_risk_briefing called: variant={variant.name}, industry='{request.industry}'")

    # Size-based rules only see a size when the variant collects one
    enterprise_size = request.enterprise_size if variant.collects_enterprise_size else None
    directive = build_recommendation_directive(enterprise_size)
    logger.info(f"Product directive: {directive.product_codes} (size_tier={directive.size_tier})")

    prompt = build_briefing_prompt(request, variant, directive)
    sections = await run_risk_briefing_agent(variant.name, prompt)

    return RiskBriefingResponse(
        variant=variant.name,
        sections=build_briefing_sections(sections, variant),
        directive=directive,
    )
