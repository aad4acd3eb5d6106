from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from campaign_brief_client.exceptions import UnsupportedFileTypeError

PNG_CONTENT_TYPE = "image/png"
ACCEPTED_SUFFIXES = {".png"}


@dataclass(frozen=True, slots=True)
class UploadFile:
    filename: str
    content: bytes
    content_type: str = PNG_CONTENT_TYPE

    @classmethod
    def from_path(cls, path: Path) -> UploadFile:
        """Select a file from disk the way the upload picker does: PNG by extension only.

        The bytes are not inspected, so a mislabelled file still gets through.
        """
        if path.suffix.lower() not in ACCEPTED_SUFFIXES:
            raise UnsupportedFileTypeError(f"Only PNG files can be uploaded, got: {path.name}")
        if not path.is_file():
            raise FileNotFoundError(f"Upload file not found: {path}")
        return cls(filename=path.name, content=path.read_bytes())


@dataclass(frozen=True, slots=True)
class UploadDraft:
    product_name: str = ""
    file: UploadFile | None = None
