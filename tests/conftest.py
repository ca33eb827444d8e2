"""
Pytest configuration for BetelSec backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from betelsec.schemas.risk_assessment import RiskAssessmentRequest  # noqa: E402


@pytest.fixture
def company_profile_request():
    """Valid company profile submission for a small company."""
    return RiskAssessmentRequest(
        variant="company_profile",
        company_name="Acme Health",
        industry="Healthcare",
        enterprise_size="small",
    )


@pytest.fixture
def quantum_threats_request():
    """Valid quantum threats submission."""
    return RiskAssessmentRequest(
        variant="quantum_threats",
        industry="Financial Institutions",
        data_types="Customer account records and SWIFT transaction logs",
    )
