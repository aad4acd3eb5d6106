from __future__ import annotations

import logging
from pathlib import Path

from campaign_brief_client.models.outcome import Failure, Success
from campaign_brief_client.models.responses import UploadResponse
from campaign_brief_client.models.upload import UploadDraft, UploadFile
from campaign_brief_client.submission.client import Encoding, MultipartPayload, SubmissionClient
from campaign_brief_client.validation import can_submit_upload

from .base import SubmissionOrchestrator

logger = logging.getLogger(__name__)

UPLOAD_ENDPOINT = "upload"
MISSING_UPLOAD_FIELDS_MESSAGE = "Please provide both a product name and a file."
UPLOAD_NETWORK_ERROR = "Network error. Is the backend running?"
UPLOAD_FALLBACK_ERROR = "Upload failed"


class UploadOrchestrator(SubmissionOrchestrator):
    """Uploads one product image for reuse, keyed by exact product name.

    The draft is cleared after a successful upload and kept as-is after a
    failure so the user can fix it and retry.
    """

    flow = "upload"

    def __init__(self, client: SubmissionClient) -> None:
        super().__init__(client)
        self._draft = UploadDraft()

    @property
    def draft(self) -> UploadDraft:
        return self._draft

    def set_product_name(self, product_name: str) -> None:
        self._ensure_not_pending()
        self._draft = UploadDraft(product_name=product_name, file=self._draft.file)

    def select_file(self, file: UploadFile | None) -> None:
        self._ensure_not_pending()
        self._draft = UploadDraft(product_name=self._draft.product_name, file=file)

    def select_path(self, path: Path) -> None:
        self.select_file(UploadFile.from_path(path))

    async def submit(self) -> Success | Failure:
        self._ensure_not_pending()
        draft = self._draft
        if not can_submit_upload(draft.product_name, draft.file):
            return self._reject(MISSING_UPLOAD_FIELDS_MESSAGE)

        payload = MultipartPayload(
            fields={"productName": draft.product_name},
            files={"file": draft.file},
        )
        logger.info("Uploading %s for product %s", draft.file.filename, draft.product_name)
        return await self._dispatch(
            lambda: self._client.submit(
                UPLOAD_ENDPOINT,
                payload,
                Encoding.MULTIPART,
                response_model=UploadResponse,
                fallback_error=UPLOAD_FALLBACK_ERROR,
                network_error=UPLOAD_NETWORK_ERROR,
            )
        )

    def _settle(self, outcome: Success | Failure) -> None:
        if isinstance(outcome, Success):
            self._draft = UploadDraft()
