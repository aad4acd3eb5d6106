from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from campaign_brief_client.brief_loader import BriefValidationError, load_and_validate_brief
from campaign_brief_client.config import ClientConfig, load_env_files
from campaign_brief_client.editor import BriefEditor
from campaign_brief_client.exceptions import CampaignClientError
from campaign_brief_client.models.outcome import Failure, Success
from campaign_brief_client.models.schema_export import write_campaign_schema
from campaign_brief_client.orchestrators import GenerateOrchestrator, UploadOrchestrator
from campaign_brief_client.submission import SubmissionClient

OUTPUT_FOLDER_HINT = "Check your local /assets/output folder for the files."
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compose and submit campaign briefs")
    parser.add_argument(
        "--base-url",
        default=None,
        help="Campaign API base URL. Defaults to $CAMPAIGN_API_BASE_URL or http://localhost:8080/api/campaigns",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the backend. Waits indefinitely when omitted.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Submit a campaign brief for asset generation")
    generate.add_argument("--brief", required=True, help="Path to campaign brief (.yaml/.yml/.json)")

    upload = subparsers.add_parser("upload", help="Upload an existing product image for reuse")
    upload.add_argument("--product-name", required=True, help="Exact product name the image belongs to")
    upload.add_argument("--file", required=True, help="Path to a PNG image")

    schema = subparsers.add_parser("schema", help="Write the generate request JSON schema")
    schema.add_argument("--output", required=True, help="Destination .json file")

    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> ClientConfig:
    env_config = ClientConfig.from_env()
    return ClientConfig(
        base_url=args.base_url or env_config.base_url,
        timeout_seconds=args.timeout if args.timeout is not None else env_config.timeout_seconds,
    )


async def _run_generate(client: SubmissionClient, brief_path: Path) -> Success | Failure:
    brief = load_and_validate_brief(brief_path, require_complete=True)
    orchestrator = GenerateOrchestrator(client, BriefEditor(brief))
    return await orchestrator.submit()


async def _run_upload(client: SubmissionClient, product_name: str, file_path: Path) -> Success | Failure:
    orchestrator = UploadOrchestrator(client)
    orchestrator.set_product_name(product_name)
    orchestrator.select_path(file_path)
    return await orchestrator.submit()


def main(argv: list[str] | None = None) -> None:
    load_env_files(PROJECT_ROOT / ".env", Path.cwd() / ".env")
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    if args.command == "schema":
        write_campaign_schema(Path(args.output))
        print(f"Schema written to {args.output}")
        return

    try:
        client = SubmissionClient(_build_config(args))
        if args.command == "generate":
            outcome = asyncio.run(_run_generate(client, Path(args.brief)))
        else:
            outcome = asyncio.run(_run_upload(client, args.product_name, Path(args.file)))
    except BriefValidationError as exc:
        raise SystemExit(f"Validation error:\n{exc}") from exc
    except (CampaignClientError, FileNotFoundError) as exc:
        raise SystemExit(f"Error: {exc}") from exc

    if isinstance(outcome, Failure):
        raise SystemExit(f"Error: {outcome.error_message}")

    if args.command == "generate":
        print("Campaign generated successfully")
        print(outcome.message)
        print(f"Processed {outcome.products_processed} product(s). {OUTPUT_FOLDER_HINT}")
    else:
        print(f"Success! {outcome.message}")


if __name__ == "__main__":
    main()
