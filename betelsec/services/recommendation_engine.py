"""
Product recommendation rules.

Decides which BetelSec products a briefing foregrounds before the prompt is
sent to the generator. The generator only elaborates this decision, so the
rules stay deterministic and testable regardless of generation quality.

Rules:
- PRISM is always recommended, always first.
- small / medium: SYNAPSE (data in transit) then DSG (data at rest).
- large, missing or unrecognised sizes: PRISM only, plus a note deferring
  the full architecture to a consultative engagement. Unknown values never
  over-promise.
"""

import logging
from typing import Optional

from betelsec.schemas.risk_assessment import (
    ProductRecommendation,
    ProductRecommendationDirective,
)
from betelsec.utils.constants import (
    BUNDLE_SIZES,
    ENTERPRISE_SIZES,
    LARGE_ENTERPRISE_NOTE,
    PRODUCT_DSG,
    PRODUCT_PRISM,
    PRODUCT_SYNAPSE,
    PRODUCTS,
)

logger = logging.getLogger(__name__)


def resolve_size_tier(enterprise_size: Optional[str]) -> str:
    """
    Map a submitted size onto the branch the rules apply.

    Matching is case-sensitive: only the literals "small" and "medium" get
    the bundle. Everything else resolves to "large".
    """
    if enterprise_size in BUNDLE_SIZES:
        return enterprise_size
    if enterprise_size is not None and enterprise_size not in ENTERPRISE_SIZES:
        logger.info(f"Unrecognised enterprise_size={enterprise_size!r}, using large-enterprise rules")
    return "large"


def build_recommendation_directive(
    enterprise_size: Optional[str],
) -> ProductRecommendationDirective:
    """
    Build the product recommendation directive for a company size.

    Args:
        enterprise_size: "small", "medium", "large", None or any other value

    Returns:
        ProductRecommendationDirective with PRISM first, SYNAPSE and DSG for
        small/medium, and a deferral note otherwise.
    """
    size_tier = resolve_size_tier(enterprise_size)

    products = [
        ProductRecommendation(product=PRODUCT_PRISM, framing=PRODUCTS[PRODUCT_PRISM]),
    ]
    conditionally_include = []
    elaboration_note = None

    if size_tier in BUNDLE_SIZES:
        for code in (PRODUCT_SYNAPSE, PRODUCT_DSG):
            products.append(ProductRecommendation(product=code, framing=PRODUCTS[code]))
            conditionally_include.append(code)
    else:
        elaboration_note = LARGE_ENTERPRISE_NOTE

    return ProductRecommendationDirective(
        requested_size=enterprise_size,
        size_tier=size_tier,
        always_include=[PRODUCT_PRISM],
        conditionally_include=conditionally_include,
        products=products,
        elaboration_note=elaboration_note,
    )
