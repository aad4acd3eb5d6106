from .client import Encoding, MultipartPayload, SubmissionClient

__all__ = ["Encoding", "MultipartPayload", "SubmissionClient"]
