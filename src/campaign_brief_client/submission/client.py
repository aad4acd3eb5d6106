from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from campaign_brief_client.config import ClientConfig
from campaign_brief_client.models.outcome import Failure, FailureKind, Success
from campaign_brief_client.models.responses import ErrorBody
from campaign_brief_client.models.upload import UploadFile

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Is the backend running?"
MALFORMED_RESPONSE_MESSAGE = "Unexpected response from server."
DEFAULT_FAILURE_MESSAGE = "Request failed"


class Encoding(str, Enum):
    JSON = "json"
    MULTIPART = "multipart"


@dataclass(frozen=True, slots=True)
class MultipartPayload:
    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, UploadFile] = field(default_factory=dict)


class SubmissionClient:
    """Performs one POST exchange per ``submit`` call and maps it to an outcome.

    The client does not guard against overlapping calls; orchestrators do.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._transport = transport

    async def submit(
        self,
        endpoint: str,
        payload: Mapping[str, Any] | MultipartPayload,
        encoding: Encoding,
        *,
        response_model: type[BaseModel],
        fallback_error: str = DEFAULT_FAILURE_MESSAGE,
        network_error: str = NETWORK_ERROR_MESSAGE,
    ) -> Success | Failure:
        url = self.config.endpoint_url(endpoint)
        request_kwargs = _encode(payload, Encoding(encoding))

        started = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, **request_kwargs)
        except httpx.RequestError as exc:
            logger.warning("POST %s failed after %.2fs: %r", url, perf_counter() - started, exc)
            return Failure(error_message=network_error, kind=FailureKind.NETWORK)

        logger.info("POST %s -> %s (%.2fs)", url, response.status_code, perf_counter() - started)
        return _to_outcome(response, response_model, fallback_error)


def _encode(payload: Mapping[str, Any] | MultipartPayload, encoding: Encoding) -> dict[str, Any]:
    if encoding is Encoding.JSON:
        if isinstance(payload, MultipartPayload):
            raise TypeError("JSON encoding expects a mapping payload")
        return {"json": dict(payload)}

    if not isinstance(payload, MultipartPayload):
        raise TypeError("Multipart encoding expects a MultipartPayload")
    files = {
        name: (upload.filename, upload.content, upload.content_type)
        for name, upload in payload.files.items()
    }
    return {"data": dict(payload.fields), "files": files}


def _server_error(response: httpx.Response) -> str | None:
    try:
        body = ErrorBody.model_validate(response.json())
    except (ValueError, ValidationError):
        return None
    return body.error or None


def _to_outcome(response: httpx.Response, response_model: type[BaseModel], fallback_error: str) -> Success | Failure:
    if not response.is_success:
        error = _server_error(response)
        if error is None:
            logger.warning("Server returned %s without a readable error body", response.status_code)
        return Failure(error_message=error or fallback_error, kind=FailureKind.SERVER)

    try:
        parsed = response_model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("Discarding malformed %s response: %s", response.status_code, exc)
        return Failure(error_message=MALFORMED_RESPONSE_MESSAGE, kind=FailureKind.MALFORMED)

    return Success(
        message=parsed.message,
        products_processed=getattr(parsed, "products_processed", None),
    )
