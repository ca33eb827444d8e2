"""
Shared Gemini client for all agents.

Uses the Google Gen AI SDK. The client is created on first use so that the
app can start (and tests can run) without an API key.
"""

import logging

from google import genai

from betelsec.config import settings

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None


class GeminiNotConfiguredError(RuntimeError):
    """Raised when GOOGLE_API_KEY is missing."""


def get_gemini_client() -> genai.Client:
    """
    Return the process-wide Gemini client, creating it on first call.

    Raises:
        GeminiNotConfiguredError: If GOOGLE_API_KEY is not configured.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.error("GOOGLE_API_KEY not configured")
        raise GeminiNotConfiguredError(
            "GOOGLE_API_KEY is not configured. "
            "Please set it in your .env file to use the AI features."
        )

    _gemini_client = genai.Client(api_key=settings.GOOGLE_API_KEY)
    logger.info("Gemini client initialized successfully")
    return _gemini_client
