from .base import SubmissionOrchestrator
from .generate import GenerateOrchestrator
from .upload import UploadOrchestrator

__all__ = ["SubmissionOrchestrator", "GenerateOrchestrator", "UploadOrchestrator"]
