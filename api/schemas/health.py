"""
Health API Schemas
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class ReadinessStatus(BaseModel):
    ready: bool = Field(..., description="Whether the sidecar can be executed")
    sidecar_path: str = Field(..., description="Configured sidecar location")
    details: Dict[str, Any] = Field(default_factory=dict)
