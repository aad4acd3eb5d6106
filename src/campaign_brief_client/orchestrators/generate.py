from __future__ import annotations

import logging

from campaign_brief_client.editor import BriefEditor
from campaign_brief_client.models.outcome import Failure, Success
from campaign_brief_client.models.responses import GenerateResponse
from campaign_brief_client.submission.client import Encoding, SubmissionClient
from campaign_brief_client.validation import missing_brief_fields

from .base import SubmissionOrchestrator

logger = logging.getLogger(__name__)

GENERATE_ENDPOINT = "generate"
MISSING_BRIEF_FIELDS_MESSAGE = "Please fill in all campaign and product fields"
GENERATE_NETWORK_ERROR = "Failed to connect to server."
GENERATE_FALLBACK_ERROR = "Generation failed"


class GenerateOrchestrator(SubmissionOrchestrator):
    """Sends the whole brief to the generation backend.

    Unlike uploads, the brief is kept after success as well as failure.  The
    editor is locked while the request is in flight.
    """

    flow = "generate"

    def __init__(self, client: SubmissionClient, editor: BriefEditor | None = None) -> None:
        super().__init__(client)
        self.editor = editor or BriefEditor()

    async def submit(self) -> Success | Failure:
        self._ensure_not_pending()
        brief = self.editor.brief
        missing = missing_brief_fields(brief)
        if missing:
            return self._reject(f"{MISSING_BRIEF_FIELDS_MESSAGE}: {', '.join(missing)}")

        payload = brief.to_payload()
        logger.info("Submitting campaign %s with %s product(s)", brief.campaign_name, len(brief.products))
        self.editor.lock()
        try:
            return await self._dispatch(
                lambda: self._client.submit(
                    GENERATE_ENDPOINT,
                    payload,
                    Encoding.JSON,
                    response_model=GenerateResponse,
                    fallback_error=GENERATE_FALLBACK_ERROR,
                    network_error=GENERATE_NETWORK_ERROR,
                )
            )
        finally:
            self.editor.unlock()
