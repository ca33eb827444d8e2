"""
FastAPI routes for industry suggestions.

Endpoints:
- POST /industry-suggestions: One-shot classification of a description
- WS   /industry-suggestions/ws: Debounced suggestions while the user types

Suggestion failures are never surfaced: the HTTP endpoint answers
{"industry": null} and the WebSocket simply stays quiet.
"""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from betelsec.agents.industry_suggestion import IndustrySuggestionError
from betelsec.schemas.industry_suggestion import (
    IndustrySuggestionRequest,
    IndustrySuggestionResponse,
    SuggestionMessage,
)
from betelsec.services.form_variants import FORM_VARIANTS, get_form_variant
from betelsec.services.industry_suggestion_controller import (
    IndustryField,
    IndustrySuggestionController,
)
from betelsec.services.industry_suggestion_service import suggest_industry
from betelsec.utils.logging import preview

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/industry-suggestions",
    tags=["industry-suggestions"]
)


@router.post(
    "",
    response_model=IndustrySuggestionResponse,
    status_code=200,
    summary="Suggest an industry from a company description",
)
async def create_industry_suggestion(
    request: IndustrySuggestionRequest,
) -> IndustrySuggestionResponse:
    """
    Classify a description into the variant's industry list.

    Returns {"industry": null} when the classifier fails or answers with a
    value outside the list.
    """
    logger.info(
        f"POST /industry-suggestions called: variant={request.variant}, "
        f"description='{preview(request.company_description)}'"
    )
    variant = get_form_variant(request.variant)

    try:
        suggestion = await suggest_industry(request.company_description, variant.industries)
    except IndustrySuggestionError as e:
        logger.warning(f"Industry suggestion failed: {e}")
        return IndustrySuggestionResponse(industry=None)

    return IndustrySuggestionResponse(industry=suggestion.industry if suggestion else None)


@router.websocket("/ws")
async def industry_suggestion_socket(websocket: WebSocket, variant: str = "company_profile"):
    """
    Debounced suggestion session.

    Client -> server: {"type": "description", "text": "..."} on every edit,
                      {"type": "select", "industry": "..."} on manual selection
    Server -> client: {"type": "industry_suggestion", "industry": "..."}
    """
    form_variant = FORM_VARIANTS.get(variant)
    if form_variant is None:
        await websocket.close(code=1008)
        return

    await websocket.accept()
    industries = form_variant.industries

    async def classify(text: str):
        return await suggest_industry(text, industries)

    async def push(industry: str) -> None:
        await websocket.send_json(SuggestionMessage(industry=industry).model_dump())

    controller = IndustrySuggestionController(
        classifier=classify,
        field=IndustryField(industries),
        on_applied=push,
    )
    logger.info(f"Industry suggestion session opened: variant={variant}")

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                logger.info(f"Ignoring malformed frame: '{preview(raw)}'")
                continue
            if not isinstance(message, dict):
                continue
            if message.get("type") == "description":
                controller.on_text_change(str(message.get("text", "")))
            elif message.get("type") == "select":
                try:
                    controller.field.select(str(message.get("industry", "")))
                except ValueError as e:
                    logger.info(f"Ignoring manual selection: {e}")
    except WebSocketDisconnect:
        logger.info("Industry suggestion session closed by client")
    finally:
        controller.close()
