from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from campaign_brief_client.exceptions import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:8080/api/campaigns"
BASE_URL_ENV = "CAMPAIGN_API_BASE_URL"
TIMEOUT_ENV = "CAMPAIGN_API_TIMEOUT_SECONDS"

_OPTION_NAMES = {"baseUrl": "base_url", "timeoutSeconds": "timeout_seconds"}


def _parse_timeout(raw: Any, source: str) -> float | None:
    if raw is None or raw == "":
        return None
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid timeout in {source}: {raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"Timeout in {source} must be positive, got {raw!r}")
    return timeout


@dataclass(slots=True)
class ClientConfig:
    """Where the campaign backend lives and how long to wait for it.

    ``timeout_seconds=None`` means requests wait until the backend answers.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        self.base_url = self.base_url.strip().rstrip("/")
        if not self.base_url:
            raise ConfigurationError("baseUrl must not be empty")

    def endpoint_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ClientConfig:
        """Build a config from the ``{"baseUrl": ...}`` options mapping."""
        unknown = sorted(set(options) - set(_OPTION_NAMES))
        if unknown:
            raise ConfigurationError("Unknown client option(s): " + ", ".join(unknown))

        kwargs: dict[str, Any] = {}
        if "baseUrl" in options:
            base_url = options["baseUrl"]
            if not isinstance(base_url, str):
                raise ConfigurationError(f"baseUrl must be a string, got {type(base_url).__name__}")
            kwargs["base_url"] = base_url
        if "timeoutSeconds" in options:
            kwargs["timeout_seconds"] = _parse_timeout(options["timeoutSeconds"], "timeoutSeconds")
        return cls(**kwargs)

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Read ``CAMPAIGN_API_BASE_URL`` and ``CAMPAIGN_API_TIMEOUT_SECONDS``."""
        return cls(
            base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
            timeout_seconds=_parse_timeout(os.getenv(TIMEOUT_ENV), TIMEOUT_ENV),
        )


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if line.startswith("export "):
        line = line[len("export ") :].lstrip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        value = value[1:-1]
    return key, value


def load_env_file(env_path: Path) -> list[str]:
    """Apply ``KEY=VALUE`` lines from *env_path* to ``os.environ``.

    Variables already set in the environment win.  Returns the keys that were
    applied; a missing file applies nothing.
    """
    if not env_path.is_file():
        return []

    applied: list[str] = []
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        entry = _parse_env_line(raw_line)
        if entry is None or entry[0] in os.environ:
            continue
        os.environ[entry[0]] = entry[1]
        applied.append(entry[0])
    return applied


def load_env_files(*env_paths: Path) -> list[str]:
    """Load several ``.env`` files in order, each path at most once."""
    applied: list[str] = []
    for env_path in dict.fromkeys(path.resolve() for path in env_paths):
        applied.extend(load_env_file(env_path))
    return applied
