from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Strict so that values like "3", 1.0 or true are treated as malformed, not coerced.
_RESPONSE_CONFIG = ConfigDict(strict=True)


class UploadResponse(BaseModel):
    model_config = _RESPONSE_CONFIG

    message: str


class GenerateResponse(BaseModel):
    model_config = _RESPONSE_CONFIG

    message: str
    products_processed: int


class ErrorBody(BaseModel):
    model_config = _RESPONSE_CONFIG

    error: str
