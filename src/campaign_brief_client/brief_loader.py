from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models.brief import CampaignBrief
from .validation import missing_brief_fields

logger = logging.getLogger(__name__)

MIN_VALID_EXAMPLE_YAML = """campaignName: "Summer Launch"
targetRegion: "Europe"
targetAudience: "Gen Z"
campaignMessage: "Cool Down"
products:
  - name: "Citrus_Spark_Soda"
    description: "Sparkling citrus drink"
    visualStyle: "Neon"
"""

_PARSERS = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


class BriefValidationError(ValueError):
    """Brief file could not be turned into a campaign brief.

    Attributes
    ----------
    fields:
        Wire paths (``campaignName``, ``products.0.visualStyle``) the error is about.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(f"{message}\n\nMinimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}")
        self.fields: list[str] = fields or []


def _read_mapping(brief_path: Path) -> dict[str, Any]:
    parser = _PARSERS.get(brief_path.suffix.lower())
    if parser is None:
        raise BriefValidationError("Unsupported brief format. Use .yaml, .yml, or .json files.")

    try:
        parsed = parser(brief_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise BriefValidationError(f"Unable to parse brief file: {exc}") from exc

    if not isinstance(parsed, dict):
        raise BriefValidationError("Brief root must be an object/map.")
    return parsed


def _error_paths(exc: ValidationError) -> list[tuple[str, str]]:
    return [(".".join(str(part) for part in item["loc"]), item["msg"]) for item in exc.errors()]


def load_and_validate_brief(brief_path: Path, require_complete: bool = False) -> CampaignBrief:
    """Load a ``.yaml``/``.yml``/``.json`` brief keyed by wire or Python field names.

    Empty fields are allowed so a draft can be reopened for editing; they are
    logged, or rejected when ``require_complete`` is set.
    """
    if not brief_path.exists():
        raise BriefValidationError(f"Brief file not found: {brief_path}")

    try:
        brief = CampaignBrief.model_validate(_read_mapping(brief_path))
    except ValidationError as exc:
        errors = _error_paths(exc)
        raise BriefValidationError(
            "Brief validation failed:\n" + "\n".join(f"- {path}: {msg}" for path, msg in errors),
            fields=[path for path, _ in errors],
        ) from exc

    missing = missing_brief_fields(brief)
    if missing and require_complete:
        raise BriefValidationError(
            "Brief is incomplete, these fields are empty:\n" + "\n".join(f"- {path}" for path in missing),
            fields=missing,
        )
    if missing:
        logger.warning("Brief %s has empty fields: %s", brief_path, ", ".join(missing))
    return brief
