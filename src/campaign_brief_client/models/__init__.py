from .brief import CampaignBrief, ProductEntry
from .outcome import Failure, FailureKind, Idle, Pending, SubmissionOutcome, Success
from .responses import ErrorBody, GenerateResponse, UploadResponse
from .upload import UploadDraft, UploadFile

__all__ = [
    "CampaignBrief",
    "ProductEntry",
    "UploadDraft",
    "UploadFile",
    "SubmissionOutcome",
    "Idle",
    "Pending",
    "Success",
    "Failure",
    "FailureKind",
    "GenerateResponse",
    "UploadResponse",
    "ErrorBody",
]
