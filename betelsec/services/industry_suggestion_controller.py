"""
Debounced industry suggestion loop.

Watches the company description as the prospect types and pre-fills the
industry field from the classifier, without calling the classifier on every
keystroke.

State machine (one controller per form session, one asyncio loop):

    IDLE -> PENDING -> IN_FLIGHT -> APPLIED | IGNORED | FAILED -> IDLE

- Every text change cancels the armed timer. Text longer than
  SUGGESTION_MIN_CHARS re-arms it (trailing-edge debounce).
- A fired timer issues exactly one classifier call. If a call is still in
  flight, the newest text waits and is sent when that call settles; calls
  never overlap.
- A result is applied only if it is in the field's enumerated list.
  Results are applied even if newer text arrived meanwhile (no cancellation
  token is threaded through the classifier; the race is accepted).
- Classifier errors are logged and never reach the user.
- close() cancels the timer and the in-flight call; nothing is applied
  afterwards.
"""

import asyncio
import enum
import logging
from typing import Awaitable, Callable, Optional, Sequence

from betelsec.config import settings
from betelsec.schemas.industry_suggestion import IndustrySuggestion

logger = logging.getLogger(__name__)

Classifier = Callable[[str], Awaitable[Optional[IndustrySuggestion]]]
AppliedCallback = Callable[[str], Awaitable[None]]


class SuggestionState(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    IN_FLIGHT = "in_flight"
    APPLIED = "applied"
    IGNORED = "ignored"
    FAILED = "failed"


class IndustryField:
    """
    The form's industry selection.

    Suggestions overwrite the value but never lock it: a manual selection is
    always accepted afterwards.
    """

    def __init__(self, industries: Sequence[str], value: str = ""):
        self.industries = tuple(industries)
        self.value = value
        self.source: Optional[str] = None

    def select(self, industry: str) -> None:
        """Manual selection from the dropdown."""
        if industry not in self.industries:
            raise ValueError(f"Unknown industry: {industry!r}")
        self.value = industry
        self.source = "user"

    def apply_suggestion(self, industry: str) -> bool:
        """Apply a classifier suggestion. Returns False for foreign values."""
        if industry not in self.industries:
            return False
        self.value = industry
        self.source = "suggestion"
        return True


class IndustrySuggestionController:
    """Owns the debounce timer and the single in-flight classifier call."""

    def __init__(
        self,
        classifier: Classifier,
        field: IndustryField,
        on_applied: Optional[AppliedCallback] = None,
        debounce_seconds: Optional[float] = None,
        min_chars: Optional[int] = None,
    ):
        self._classifier = classifier
        self.field = field
        self._on_applied = on_applied
        self._debounce_seconds = (
            settings.SUGGESTION_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        )
        self._min_chars = settings.SUGGESTION_MIN_CHARS if min_chars is None else min_chars

        self._timer: Optional[asyncio.TimerHandle] = None
        self._in_flight: Optional[asyncio.Task] = None
        self._queued_text: Optional[str] = None
        self._closed = False

        self.state = SuggestionState.IDLE
        self.last_outcome: Optional[SuggestionState] = None
        self.calls_issued = 0

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def on_text_change(self, text: str) -> None:
        """Feed the latest description text. Must run inside the event loop."""
        if self._closed:
            return

        self._cancel_timer()

        if len(text) <= self._min_chars:
            if self._in_flight is None:
                self.state = SuggestionState.IDLE
            return

        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce_seconds, self._on_timer_fired, text)
        if self._in_flight is None:
            self.state = SuggestionState.PENDING

    def close(self) -> None:
        """Tear down: cancel the pending timer and the in-flight call."""
        if self._closed:
            return
        self._closed = True
        self._cancel_timer()
        self._queued_text = None
        if self._in_flight is not None:
            self._in_flight.cancel()
            self._in_flight = None
        self.state = SuggestionState.IDLE
        logger.debug("Industry suggestion controller closed")

    async def wait_until_idle(self) -> None:
        """Wait until no timer is armed and no call is in flight."""
        loop = asyncio.get_running_loop()
        while True:
            if self._in_flight is not None:
                await asyncio.wait({self._in_flight})
            elif self._timer is not None:
                await asyncio.sleep(max(self._timer.when() - loop.time(), 0))
            else:
                return

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer_fired(self, text: str) -> None:
        self._timer = None
        if self._closed:
            return
        if self._in_flight is not None:
            # Sent once the current call settles
            self._queued_text = text
            return
        self._start_call(text)

    def _start_call(self, text: str) -> None:
        self.state = SuggestionState.IN_FLIGHT
        self.calls_issued += 1
        self._in_flight = asyncio.get_running_loop().create_task(self._run_classification(text))

    async def _run_classification(self, text: str) -> None:
        try:
            suggestion = await self._classifier(text)
            outcome = await self._apply(suggestion)
        except Exception as e:
            logger.warning(f"Industry suggestion failed: {e}")
            outcome = SuggestionState.FAILED
        finally:
            self._in_flight = None

        self.last_outcome = outcome
        self._after_call()

    async def _apply(self, suggestion: Optional[IndustrySuggestion]) -> SuggestionState:
        if self._closed or suggestion is None:
            return SuggestionState.IGNORED

        if not self.field.apply_suggestion(suggestion.industry):
            logger.info(f"Ignoring suggestion outside the active list: '{suggestion.industry}'")
            return SuggestionState.IGNORED

        logger.info(f"Applied industry suggestion: '{suggestion.industry}'")
        if self._on_applied is not None:
            # The field already changed; a delivery failure does not undo it
            try:
                await self._on_applied(suggestion.industry)
            except Exception as e:
                logger.warning(f"Failed to deliver industry suggestion: {e}")
        return SuggestionState.APPLIED

    def _after_call(self) -> None:
        if self._closed:
            self.state = SuggestionState.IDLE
            return
        if self._queued_text is not None:
            text, self._queued_text = self._queued_text, None
            self._start_call(text)
        elif self._timer is not None:
            self.state = SuggestionState.PENDING
        else:
            self.state = SuggestionState.IDLE
