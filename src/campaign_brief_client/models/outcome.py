"""Submission outcomes.

Each submission attempt moves its orchestrator through
``Idle -> Pending -> Success | Failure``.  Outcomes are immutable values and are
replaced wholesale on every attempt.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class FailureKind(str, Enum):
    VALIDATION = "validation"
    NETWORK = "network"
    SERVER = "server"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Pending:
    pass


@dataclass(frozen=True, slots=True)
class Success:
    message: str
    # Only generate responses carry a count; upload responses leave it unset.
    products_processed: int | None = None


@dataclass(frozen=True, slots=True)
class Failure:
    error_message: str
    kind: FailureKind


SubmissionOutcome = Union[Idle, Pending, Success, Failure]
