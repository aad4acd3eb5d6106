"""
Domain-specific exceptions for the campaign brief client.

Submission failures (network, server, malformed response) are reported as
``Failure`` outcomes, not exceptions.  The exceptions below cover caller
mistakes and configuration problems.  All inherit from ``CampaignClientError``
so callers can use a single broad catch when needed.
"""

from __future__ import annotations


class CampaignClientError(Exception):
    """Base exception for all client errors."""


class SubmissionInProgressError(CampaignClientError):
    """Raised when a form is edited or resubmitted while its submission is pending.

    Attributes
    ----------
    flow:
        Name of the submission flow that is busy (``"upload"`` or ``"generate"``).
    """

    def __init__(self, flow: str) -> None:
        super().__init__(f"A {flow} submission is already in progress")
        self.flow = flow


class ConfigurationError(CampaignClientError):
    """Raised when client configuration (options, env vars) is invalid."""


class UnsupportedFileTypeError(CampaignClientError):
    """Raised when a non-PNG file is selected for upload."""
