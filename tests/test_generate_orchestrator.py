from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from campaign_brief_client.config import ClientConfig
from campaign_brief_client.editor import BriefEditor
from campaign_brief_client.exceptions import SubmissionInProgressError
from campaign_brief_client.models.outcome import Failure, FailureKind, Success
from campaign_brief_client.models.upload import UploadFile
from campaign_brief_client.orchestrators import GenerateOrchestrator, UploadOrchestrator
from campaign_brief_client.submission.client import SubmissionClient

BASE_URL = "http://backend.test/api/campaigns"

SUMMER_LAUNCH_BODY = {
    "campaignName": "Summer Launch",
    "targetRegion": "Europe",
    "targetAudience": "Gen Z",
    "campaignMessage": "Cool Down",
    "products": [
        {"name": "Citrus_Spark_Soda", "description": "Sparkling citrus drink", "visualStyle": "Neon"},
    ],
}


def _fill_summer_launch(editor: BriefEditor) -> None:
    editor.update_brief_field("campaignName", "Summer Launch")
    editor.update_brief_field("targetRegion", "Europe")
    editor.update_brief_field("targetAudience", "Gen Z")
    editor.update_brief_field("campaignMessage", "Cool Down")
    editor.update_product_field(0, "name", "Citrus_Spark_Soda")
    editor.update_product_field(0, "description", "Sparkling citrus drink")
    editor.update_product_field(0, "visualStyle", "Neon")


def _orchestrator(responses: list[httpx.Response], calls: list[httpx.Request]) -> GenerateOrchestrator:
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return responses.pop(0)

    client = SubmissionClient(ClientConfig(base_url=BASE_URL), transport=httpx.MockTransport(handler))
    orchestrator = GenerateOrchestrator(client)
    _fill_summer_launch(orchestrator.editor)
    return orchestrator


@pytest.mark.asyncio
async def test_generate_success_keeps_brief() -> None:
    calls: list[httpx.Request] = []
    orchestrator = _orchestrator([httpx.Response(200, json={"message": "OK", "products_processed": 1})], calls)
    before = orchestrator.editor.brief

    outcome = await orchestrator.submit()

    assert outcome == Success(message="OK", products_processed=1)
    assert str(calls[0].url) == f"{BASE_URL}/generate"
    assert json.loads(calls[0].content) == SUMMER_LAUNCH_BODY
    assert list(json.loads(calls[0].content)) == list(SUMMER_LAUNCH_BODY)
    assert orchestrator.editor.brief == before
    assert not orchestrator.editor.locked


@pytest.mark.asyncio
async def test_generate_server_failure_surfaces_error_and_allows_retry() -> None:
    calls: list[httpx.Request] = []
    orchestrator = _orchestrator(
        [
            httpx.Response(500, json={"error": "GenAI quota exceeded"}),
            httpx.Response(200, json={"message": "OK", "products_processed": 1}),
        ],
        calls,
    )
    before = orchestrator.editor.brief

    failure = await orchestrator.submit()
    assert failure == Failure(error_message="GenAI quota exceeded", kind=FailureKind.SERVER)
    assert orchestrator.editor.brief == before

    retry = await orchestrator.submit()
    assert retry == Success(message="OK", products_processed=1)
    assert json.loads(calls[1].content) == SUMMER_LAUNCH_BODY


@pytest.mark.asyncio
async def test_compliance_rejection_is_a_server_failure() -> None:
    calls: list[httpx.Request] = []
    orchestrator = _orchestrator(
        [httpx.Response(400, json={"status": "FAILED", "error": "Campaign message flagged by legal/compliance check."})],
        calls,
    )
    outcome = await orchestrator.submit()
    assert outcome == Failure(
        error_message="Campaign message flagged by legal/compliance check.", kind=FailureKind.SERVER
    )


@pytest.mark.asyncio
async def test_repeated_submissions_are_independent() -> None:
    calls: list[httpx.Request] = []
    orchestrator = _orchestrator(
        [
            httpx.Response(200, json={"message": "OK", "products_processed": 1}),
            httpx.Response(200, json={"message": "OK", "products_processed": 1}),
        ],
        calls,
    )

    first = await orchestrator.submit()
    second = await orchestrator.submit()

    assert first == second == Success(message="OK", products_processed=1)
    assert first is not second
    assert calls[0].content == calls[1].content


@pytest.mark.asyncio
async def test_incomplete_brief_is_rejected_locally() -> None:
    calls: list[httpx.Request] = []
    orchestrator = _orchestrator([], calls)
    orchestrator.editor.add_product()

    outcome = await orchestrator.submit()

    assert isinstance(outcome, Failure)
    assert outcome.kind is FailureKind.VALIDATION
    assert "products.1.name" in outcome.error_message
    assert calls == []


@pytest.mark.asyncio
async def test_network_failure_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused")

    client = SubmissionClient(ClientConfig(base_url=BASE_URL), transport=httpx.MockTransport(handler))
    orchestrator = GenerateOrchestrator(client)
    _fill_summer_launch(orchestrator.editor)

    outcome = await orchestrator.submit()
    assert outcome == Failure(error_message="Failed to connect to server.", kind=FailureKind.NETWORK)


@pytest.mark.asyncio
async def test_brief_is_locked_while_pending_but_upload_is_not() -> None:
    release = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/generate"):
            await release.wait()
            return httpx.Response(200, json={"message": "OK", "products_processed": 1})
        return httpx.Response(200, json={"message": "Stored"})

    client = SubmissionClient(ClientConfig(base_url=BASE_URL), transport=httpx.MockTransport(handler))
    generate = GenerateOrchestrator(client)
    upload = UploadOrchestrator(client)
    _fill_summer_launch(generate.editor)

    task = asyncio.create_task(generate.submit())
    while not generate.is_pending:
        await asyncio.sleep(0)

    with pytest.raises(SubmissionInProgressError):
        generate.editor.update_brief_field("campaignName", "Winter Launch")
    with pytest.raises(SubmissionInProgressError):
        await generate.submit()

    upload.set_product_name("Citrus_Spark_Soda")
    upload.select_file(UploadFile(filename="citrus.png", content=b"\x89PNG"))
    assert await upload.submit() == Success(message="Stored")
    assert generate.is_pending

    release.set()
    assert await task == Success(message="OK", products_processed=1)
    generate.editor.update_brief_field("campaignName", "Winter Launch")
    assert generate.editor.brief.campaign_name == "Winter Launch"


@pytest.mark.asyncio
async def test_editor_unlocked_when_transport_raises_unexpectedly() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("transport bug")

    client = SubmissionClient(ClientConfig(base_url=BASE_URL), transport=httpx.MockTransport(handler))
    orchestrator = GenerateOrchestrator(client)
    _fill_summer_launch(orchestrator.editor)

    with pytest.raises(RuntimeError):
        await orchestrator.submit()
    assert not orchestrator.is_pending
    assert not orchestrator.editor.locked
