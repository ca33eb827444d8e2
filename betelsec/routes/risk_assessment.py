"""
FastAPI routes for the risk assessment form.

Endpoints:
- GET  /risk-assessment/variants: Form variants (fields, industries, sections)
- POST /risk-assessment/briefings: Generate a risk briefing

Both endpoints are public: the form is a lead-generation tool on the
marketing site.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from betelsec.agents.risk_briefing import RiskBriefingGenerationError
from betelsec.schemas.risk_assessment import (
    FormValidationErrorResponse,
    FormVariantResponse,
    RiskAssessmentRequest,
    RiskBriefingResponse,
)
from betelsec.services.form_variants import FORM_VARIANTS, FormValidationError
from betelsec.services.risk_briefing_service import generate_risk_briefing
from betelsec.utils.constants import GENERATION_ERROR_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/risk-assessment",
    tags=["risk-assessment"]
)


@router.get(
    "/variants",
    response_model=List[FormVariantResponse],
    summary="List risk assessment form variants",
)
async def list_variants() -> List[FormVariantResponse]:
    """Describe every form variant so the front end can build the form."""
    return [variant.to_response() for variant in FORM_VARIANTS.values()]


@router.post(
    "/briefings",
    response_model=RiskBriefingResponse,
    status_code=200,
    summary="Generate a quantum risk briefing",
    responses={
        422: {"model": FormValidationErrorResponse, "description": "Inline field errors"},
        502: {"description": "Generation failed, resubmit to try again"},
    },
    description="""
    Generates a personalized, AI-powered quantum risk briefing.

    **Flow:**
    1. Validate fields for the submitted variant (422 with one error per field)
    2. Decide the product directive from the company size
    3. Single Gemini call with the directive in the prompt
    4. Render each markdown section into display blocks

    **Failure:** any generation failure returns 502 with one generic message.
    There is no automatic retry; the user resubmits.
    """
)
async def create_briefing(request: RiskAssessmentRequest):
    """
    Risk briefing endpoint.

    - Parse: Pydantic RiskAssessmentRequest
    - Validate: variant field rules (inline errors)
    - Call LLM: via risk_briefing_service
    - Return: RiskBriefingResponse (never persisted)
    """
    logger.info(f"POST /risk-assessment/briefings called: variant={request.variant}")

    try:
        return await generate_risk_briefing(request)
    except FormValidationError as e:
        logger.info(f"Briefing request rejected: {e}")
        body = FormValidationErrorResponse(details=e.errors)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=body.model_dump(),
        )
    except RiskBriefingGenerationError as e:
        logger.error(f"Briefing generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=GENERATION_ERROR_MESSAGE,
        )
