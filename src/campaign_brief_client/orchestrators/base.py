from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from campaign_brief_client.exceptions import SubmissionInProgressError
from campaign_brief_client.models.outcome import Failure, FailureKind, Idle, Pending, SubmissionOutcome, Success
from campaign_brief_client.submission.client import SubmissionClient

logger = logging.getLogger(__name__)

OutcomeListener = Callable[[SubmissionOutcome], None]


class SubmissionOrchestrator:
    """State machine shared by the upload and generate flows.

    ``Idle -> Pending -> Success | Failure``; a settled outcome stays visible
    until the next attempt or ``acknowledge()``.  Starting an attempt while
    ``Pending`` raises ``SubmissionInProgressError``, so outcomes of one
    orchestrator are always observed in submission order.
    """

    flow = "submission"

    def __init__(self, client: SubmissionClient) -> None:
        self._client = client
        self._outcome: SubmissionOutcome = Idle()
        self._listeners: list[OutcomeListener] = []

    @property
    def outcome(self) -> SubmissionOutcome:
        return self._outcome

    @property
    def is_pending(self) -> bool:
        return isinstance(self._outcome, Pending)

    def subscribe(self, listener: OutcomeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def acknowledge(self) -> None:
        """Dismiss a settled outcome and return to ``Idle``."""
        if isinstance(self._outcome, (Success, Failure)):
            self._transition(Idle())

    def _ensure_not_pending(self) -> None:
        if self.is_pending:
            raise SubmissionInProgressError(self.flow)

    def _reject(self, message: str) -> Failure:
        logger.info("%s rejected before sending: %s", self.flow, message)
        failure = Failure(error_message=message, kind=FailureKind.VALIDATION)
        self._transition(failure)
        return failure

    async def _dispatch(self, send: Callable[[], Awaitable[Success | Failure]]) -> Success | Failure:
        self._ensure_not_pending()
        self._transition(Pending())
        try:
            outcome = await send()
        except BaseException:
            self._transition(Idle())
            raise

        self._settle(outcome)
        self._transition(outcome)
        return outcome

    def _settle(self, outcome: Success | Failure) -> None:
        """Hook run after the exchange and before listeners see the outcome."""

    def _transition(self, outcome: SubmissionOutcome) -> None:
        logger.debug("%s outcome: %s -> %s", self.flow, type(self._outcome).__name__, type(outcome).__name__)
        self._outcome = outcome
        for listener in list(self._listeners):
            listener(outcome)
