"""
Industry Suggestion Prompt Templates

The classifier picks the single best-fitting industry for a free-text
company description. The allowed values are also enforced through the
response schema enum.
"""

from typing import Sequence

INDUSTRY_SUGGESTION_SYSTEM_PROMPT = """You classify companies into industries for BetelSec's risk assessment form.

<rules>
- Select exactly one industry from the provided list.
- If nothing fits, answer "Other".
- Return JSON matching the response schema, nothing else.
</rules>"""


def build_industry_suggestion_prompt(
    company_description: str,
    industries: Sequence[str],
) -> str:
    """
    Build the user prompt for the industry classifier.

    Args:
        company_description: Free text typed by the prospect
        industries: Enumerated industry list the answer must come from

    Returns:
        str: Formatted user prompt
    """
    options = "\n".join(f"- {industry}" for industry in industries)

    return f"""Based on the following company description, select the single best-fitting industry from the provided list.

<company_description>
{company_description}
</company_description>

<industries>
{options}
</industries>

Your response MUST be one of the industries listed above."""


def build_industry_response_schema(industries: Sequence[str]) -> dict:
    """JSON schema for {"industry": <one of industries>}."""
    return {
        "type": "OBJECT",
        "properties": {
            "industry": {
                "type": "STRING",
                "enum": list(industries),
            },
        },
        "required": ["industry"],
    }
