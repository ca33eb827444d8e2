"""
Risk assessment form variants.

The site has shipped several near-identical versions of the assessment form.
They are modelled as one schema with a per-variant configuration: which
fields are collected, which are required, the enumerated industry list and
which briefing sections the generator produces.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from betelsec.schemas.risk_assessment import (
    FieldError,
    FormVariantResponse,
    RiskAssessmentRequest,
)
from betelsec.utils.constants import FULL_INDUSTRIES, SHORT_INDUSTRIES

DATA_TYPES_MIN_LENGTH = 10

SECTION_TITLES: Dict[str, str] = {
    "sensitive_data": "Sensitive Data Profile",
    "threats": "Threat Analysis & Real-World Impact",
    "top_threats": "Top Quantum Threats",
    "hndl_scenarios": '"Harvest Now, Decrypt Later" Scenarios',
    "product_recommendations": "Recommended BetelSec Solutions",
}

FIELD_MESSAGES: Dict[str, str] = {
    "industry": "Please select an industry.",
    "company_name": "Company name is required.",
    "enterprise_size": "Please select your company size.",
    "data_types": (
        f"Please describe your data types in at least {DATA_TYPES_MIN_LENGTH} characters."
    ),
}


class FormValidationError(ValueError):
    """Raised when a submission fails field-level validation."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Invalid fields: {fields}")


@dataclass(frozen=True)
class FormVariant:
    """Configuration of one form version."""
    name: str
    fields: Tuple[str, ...]
    required_fields: Tuple[str, ...]
    industries: Tuple[str, ...]
    output_keys: Tuple[str, ...]

    @property
    def collects_enterprise_size(self) -> bool:
        return "enterprise_size" in self.fields

    def is_valid_industry(self, industry: str) -> bool:
        return industry in self.industries

    def to_response(self) -> FormVariantResponse:
        return FormVariantResponse(
            name=self.name,
            fields=list(self.fields),
            required_fields=list(self.required_fields),
            industries=list(self.industries),
            output_keys=list(self.output_keys),
            collects_enterprise_size=self.collects_enterprise_size,
        )


FORM_VARIANTS: Dict[str, FormVariant] = {
    "company_profile": FormVariant(
        name="company_profile",
        fields=("company_name", "company_description", "industry", "enterprise_size"),
        required_fields=("company_name", "industry", "enterprise_size"),
        industries=FULL_INDUSTRIES,
        output_keys=("sensitive_data", "threats", "product_recommendations"),
    ),
    "quantum_threats": FormVariant(
        name="quantum_threats",
        fields=("industry", "data_types"),
        required_fields=("industry", "data_types"),
        industries=SHORT_INDUSTRIES,
        output_keys=("top_threats", "hndl_scenarios", "product_recommendations"),
    ),
}


def get_form_variant(name: str) -> FormVariant:
    """
    Look up a form variant by name.

    Raises:
        KeyError: If the variant does not exist.
    """
    return FORM_VARIANTS[name]


def collect_field_errors(
    request: RiskAssessmentRequest,
    variant: FormVariant,
) -> List[FieldError]:
    """
    Return inline errors for every invalid field, in form order.

    Fields the variant does not collect are ignored.
    """
    errors: List[FieldError] = []

    for field in variant.fields:
        value = getattr(request, field)
        text = value.strip() if isinstance(value, str) else ""

        if field == "industry":
            # Empty and foreign values both mean "nothing valid selected"
            if not variant.is_valid_industry(value or ""):
                errors.append(FieldError(field=field, message=FIELD_MESSAGES[field]))
        elif field == "data_types":
            if len(value or "") < DATA_TYPES_MIN_LENGTH:
                errors.append(FieldError(field=field, message=FIELD_MESSAGES[field]))
        elif field in variant.required_fields and not text:
            errors.append(FieldError(field=field, message=FIELD_MESSAGES[field]))

    return errors


def validate_request(request: RiskAssessmentRequest) -> FormVariant:
    """
    Validate a submission against its variant.

    Returns:
        The FormVariant the request was validated against.

    Raises:
        FormValidationError: With one FieldError per invalid field.
    """
    variant = get_form_variant(request.variant)
    errors = collect_field_errors(request, variant)
    if errors:
        raise FormValidationError(errors)
    return variant
