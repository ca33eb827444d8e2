"""
Tests for the product recommendation rules.

Covers:
- small / medium companies get PRISM, SYNAPSE, DSG in that order
- large companies get PRISM only plus the deferral note
- unknown, miscased and missing sizes fall back to the large-enterprise rules
- the directive rendered into the prompt matches the decision
"""

import pytest

from betelsec.agents.risk_briefing.prompts import build_directive_instructions
from betelsec.services.recommendation_engine import (
    build_recommendation_directive,
    resolve_size_tier,
)
from betelsec.utils.constants import LARGE_ENTERPRISE_NOTE


# =============================================================================
# UNIT TESTS: Size tiers
# =============================================================================

class TestSizeTier:
    """Tests for resolve_size_tier."""

    @pytest.mark.parametrize("size", ["small", "medium", "large"])
    def test_known_sizes_map_to_themselves(self, size):
        assert resolve_size_tier(size) == size

    @pytest.mark.parametrize("size", ["Small", "MEDIUM", "enterprise", "", " small", None])
    def test_everything_else_is_large(self, size):
        assert resolve_size_tier(size) == "large"


# =============================================================================
# UNIT TESTS: Directive
# =============================================================================

class TestRecommendationDirective:
    """Tests for build_recommendation_directive."""

    @pytest.mark.parametrize("size", ["small", "medium"])
    def test_small_and_medium_get_full_bundle_in_order(self, size):
        directive = build_recommendation_directive(size)

        assert directive.product_codes == ["PRISM", "SYNAPSE", "DSG"]
        assert directive.always_include == ["PRISM"]
        assert directive.conditionally_include == ["SYNAPSE", "DSG"]
        assert directive.elaboration_note is None
        assert directive.size_tier == size

    def test_large_gets_prism_only_with_note(self):
        directive = build_recommendation_directive("large")

        assert directive.product_codes == ["PRISM"]
        assert directive.conditionally_include == []
        assert directive.elaboration_note == LARGE_ENTERPRISE_NOTE
        assert "consultative" in directive.elaboration_note

    @pytest.mark.parametrize("size", ["huge", "Small", "", None])
    def test_unrecognised_size_uses_large_branch(self, size):
        directive = build_recommendation_directive(size)

        assert directive.product_codes == ["PRISM"]
        assert directive.size_tier == "large"
        assert directive.elaboration_note is not None
        assert directive.requested_size == size

    def test_prism_always_first(self):
        for size in ["small", "medium", "large", "unknown", None]:
            assert build_recommendation_directive(size).product_codes[0] == "PRISM"

    def test_synapse_framed_as_transit_and_dsg_as_rest(self):
        directive = build_recommendation_directive("medium")
        framings = {item.product: item.framing for item in directive.products}

        assert "in transit" in framings["SYNAPSE"]
        assert "at rest" in framings["DSG"]

    def test_directive_is_pure(self):
        assert build_recommendation_directive("small") == build_recommendation_directive("small")


# =============================================================================
# UNIT TESTS: Directive rendering in the prompt
# =============================================================================

class TestDirectiveInstructions:
    """Tests for build_directive_instructions."""

    def test_bundle_lists_products_in_order(self):
        block = build_directive_instructions(
            build_recommendation_directive("small"), company_label="Acme"
        )

        assert block.index("1. PRISM") < block.index("2. SYNAPSE") < block.index("3. DSG")
        assert "also recommend SYNAPSE and DSG" in block
        assert "Acme" in block

    def test_large_lists_only_prism_and_note(self):
        block = build_directive_instructions(build_recommendation_directive("large"))

        assert "1. PRISM" in block
        assert "SYNAPSE" not in block.split("</product_directive>")[0]
        assert "DSG" not in block.split("</product_directive>")[0]
        assert "Recommend ONLY PRISM" in block
        assert LARGE_ENTERPRISE_NOTE in block
