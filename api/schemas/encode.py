"""
Encode API Schemas - Request/response models for the /encode endpoint
"""

from pydantic import BaseModel, Field


class EncodeRequest(BaseModel):
    """String to hand to the sidecar. Any string is accepted, including ''."""

    data: str = Field(..., description="Text to encode")


class EncodeResponse(BaseModel):
    """Sidecar output with its trailing newline removed"""

    encoded: str = Field(..., description="Base64 text produced by the sidecar")
