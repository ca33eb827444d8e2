"""
Tests for the industry suggestion service and agent.
"""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from betelsec.agents.industry_suggestion import (
    IndustrySuggestionError,
    build_industry_response_schema,
    build_industry_suggestion_prompt,
    run_industry_suggestion_agent,
)
from betelsec.schemas.industry_suggestion import IndustrySuggestion
from betelsec.services.industry_suggestion_service import suggest_industry
from betelsec.utils.constants import FULL_INDUSTRIES, SHORT_INDUSTRIES


def _mock_client(text=None, side_effect=None):
    response = MagicMock()
    response.text = text
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=side_effect)
    return client


class TestPrompt:
    """Tests for the classifier prompt and schema."""

    def test_prompt_lists_every_industry(self):
        prompt = build_industry_suggestion_prompt("We mine copper.", FULL_INDUSTRIES)

        assert "We mine copper." in prompt
        for industry in FULL_INDUSTRIES:
            assert f"- {industry}" in prompt

    def test_schema_enum_matches_list(self):
        schema = build_industry_response_schema(SHORT_INDUSTRIES)

        assert schema["properties"]["industry"]["enum"] == list(SHORT_INDUSTRIES)
        assert schema["required"] == ["industry"]


class TestIndustrySuggestionAgent:
    """Tests for run_industry_suggestion_agent with a mocked client."""

    @pytest.mark.asyncio
    async def test_parses_industry(self):
        client = _mock_client(json.dumps({"industry": "Mining & Metals"}))

        with patch("betelsec.agents.industry_suggestion.agent.get_gemini_client", return_value=client):
            suggestion = await run_industry_suggestion_agent("We mine copper in Chile.")

        assert suggestion == IndustrySuggestion(industry="Mining & Metals")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "not json", json.dumps({"industry": ""}), json.dumps(["Retail"])])
    async def test_unusable_output_raises(self, text):
        client = _mock_client(text)

        with patch("betelsec.agents.industry_suggestion.agent.get_gemini_client", return_value=client):
            with pytest.raises(IndustrySuggestionError):
                await run_industry_suggestion_agent("Some company description here")

    @pytest.mark.asyncio
    async def test_api_error_raises(self):
        client = _mock_client(side_effect=RuntimeError("timeout"))

        with patch("betelsec.agents.industry_suggestion.agent.get_gemini_client", return_value=client):
            with pytest.raises(IndustrySuggestionError):
                await run_industry_suggestion_agent("Some company description here")


class TestSuggestIndustry:
    """Tests for the membership check in suggest_industry."""

    @pytest.mark.asyncio
    async def test_member_is_returned(self):
        with patch(
            "betelsec.services.industry_suggestion_service.run_industry_suggestion_agent",
            new=AsyncMock(return_value=IndustrySuggestion(industry="Healthcare")),
        ):
            suggestion = await suggest_industry("A hospital network", SHORT_INDUSTRIES)

        assert suggestion.industry == "Healthcare"

    @pytest.mark.asyncio
    async def test_foreign_value_is_dropped(self):
        with patch(
            "betelsec.services.industry_suggestion_service.run_industry_suggestion_agent",
            new=AsyncMock(return_value=IndustrySuggestion(industry="Quantum Finance")),
        ):
            suggestion = await suggest_industry("A quant hedge fund", SHORT_INDUSTRIES)

        assert suggestion is None
