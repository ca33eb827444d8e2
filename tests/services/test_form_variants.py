"""
Tests for form variants and field validation.
"""

import pytest

from betelsec.agents.risk_briefing.types import BRIEFING_OUTPUT_MODELS
from betelsec.schemas.risk_assessment import RiskAssessmentRequest
from betelsec.services.form_variants import (
    FORM_VARIANTS,
    SECTION_TITLES,
    FormValidationError,
    collect_field_errors,
    get_form_variant,
    validate_request,
)
from betelsec.utils.constants import FULL_INDUSTRIES, SHORT_INDUSTRIES


class TestVariantConfiguration:
    """Variant tables are consistent with the agents and the catalog."""

    def test_industry_lists(self):
        assert get_form_variant("company_profile").industries == FULL_INDUSTRIES
        assert get_form_variant("quantum_threats").industries == SHORT_INDUSTRIES
        assert len(SHORT_INDUSTRIES) == 7
        assert len(FULL_INDUSTRIES) == 23

    @pytest.mark.parametrize("name", list(FORM_VARIANTS))
    def test_output_keys_match_agent_schema(self, name):
        variant = FORM_VARIANTS[name]
        model = BRIEFING_OUTPUT_MODELS[name]

        assert set(variant.output_keys) == set(model.model_fields)
        assert all(key in SECTION_TITLES for key in variant.output_keys)

    @pytest.mark.parametrize("name", list(FORM_VARIANTS))
    def test_industry_always_required(self, name):
        assert "industry" in FORM_VARIANTS[name].required_fields

    def test_only_company_profile_collects_size(self):
        assert get_form_variant("company_profile").collects_enterprise_size is True
        assert get_form_variant("quantum_threats").collects_enterprise_size is False

    def test_unknown_variant(self):
        with pytest.raises(KeyError):
            get_form_variant("legacy")


class TestFieldValidation:
    """Tests for collect_field_errors / validate_request."""

    def test_valid_requests_pass(self, company_profile_request, quantum_threats_request):
        assert validate_request(company_profile_request).name == "company_profile"
        assert validate_request(quantum_threats_request).name == "quantum_threats"

    def test_missing_industry(self):
        request = RiskAssessmentRequest(
            variant="quantum_threats",
            data_types="Patient medical records",
        )
        errors = collect_field_errors(request, get_form_variant("quantum_threats"))

        assert [(e.field, e.message) for e in errors] == [
            ("industry", "Please select an industry."),
        ]

    def test_industry_from_other_list_rejected(self):
        # Valid in the full list, not in the short one
        request = RiskAssessmentRequest(
            variant="quantum_threats",
            industry="Automotive",
            data_types="Vehicle telemetry and dealer records",
        )

        with pytest.raises(FormValidationError) as exc_info:
            validate_request(request)

        assert [e.field for e in exc_info.value.errors] == ["industry"]

    def test_data_types_min_length(self):
        request = RiskAssessmentRequest(
            variant="quantum_threats",
            industry="Healthcare",
            data_types="records",
        )
        errors = collect_field_errors(request, get_form_variant("quantum_threats"))

        assert len(errors) == 1
        assert errors[0].field == "data_types"
        assert "at least 10 characters" in errors[0].message

    def test_data_types_exactly_ten_characters_ok(self):
        request = RiskAssessmentRequest(
            variant="quantum_threats",
            industry="Healthcare",
            data_types="0123456789",
        )
        assert collect_field_errors(request, get_form_variant("quantum_threats")) == []

    def test_company_profile_reports_every_missing_field_in_form_order(self):
        request = RiskAssessmentRequest(variant="company_profile", company_name="  ")

        with pytest.raises(FormValidationError) as exc_info:
            validate_request(request)

        assert [e.field for e in exc_info.value.errors] == [
            "company_name", "industry", "enterprise_size",
        ]

    def test_unrecognised_size_is_not_a_validation_error(self):
        request = RiskAssessmentRequest(
            variant="company_profile",
            company_name="Acme",
            industry="Retail",
            enterprise_size="gigantic",
        )
        assert validate_request(request).name == "company_profile"

    def test_fields_outside_variant_are_ignored(self):
        request = RiskAssessmentRequest(
            variant="quantum_threats",
            industry="Healthcare",
            data_types="Clinical trial data",
            company_name="",
            enterprise_size="",
        )
        assert collect_field_errors(request, get_form_variant("quantum_threats")) == []
