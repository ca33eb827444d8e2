"""
Service layer for the BetelSec risk assessment backend.

Contains the deterministic logic around the AI agents:
- Form variants and field validation
- Product recommendation rules
- Markdown rendering of generated briefings
- The debounced industry suggestion loop

Services act as the glue between routes (HTTP layer) and agents.
"""

from .form_variants import (
    FORM_VARIANTS,
    FormValidationError,
    FormVariant,
    get_form_variant,
    validate_request,
)
from .industry_suggestion_controller import (
    IndustryField,
    IndustrySuggestionController,
    SuggestionState,
)
from .industry_suggestion_service import suggest_industry
from .markdown_renderer import classify_line, render_markdown
from .recommendation_engine import build_recommendation_directive
from .risk_briefing_service import generate_risk_briefing

__all__ = [
    "FORM_VARIANTS",
    "FormValidationError",
    "FormVariant",
    "get_form_variant",
    "validate_request",
    "IndustryField",
    "IndustrySuggestionController",
    "SuggestionState",
    "suggest_industry",
    "classify_line",
    "render_markdown",
    "build_recommendation_directive",
    "generate_risk_briefing",
]
