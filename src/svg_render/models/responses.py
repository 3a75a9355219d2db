"""Response models for the service."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service readiness as seen by the render endpoint."""
    status: str = Field(description="'ready' when renders can be served, 'unavailable' otherwise")
    version: str
    fetch_client_open: bool = Field(description="Whether the shared source HTTP client is open")
