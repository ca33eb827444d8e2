"""
Logging utilities for the BetelSec risk assessment backend.

Logging is configured once in main.py; modules use logging.getLogger(__name__).

PRIVACY RULES:
- NEVER log API keys or secrets
- NEVER log full company descriptions or data type descriptions (lead data)
- NEVER log generated briefings in full

Acceptable logging:
- High-level events (e.g., "RiskBriefingAgent invoked", "suggestion applied")
- Non-sensitive metadata (e.g., "variant=quantum_threats", "industry='Healthcare'")
- Truncated previews through preview()
"""

from typing import Optional


def preview(text: Optional[str], limit: int = 50) -> str:
    """Truncate free text for log lines."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
