"""Configuration models for the service."""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _optional_float(value: str) -> Optional[float]:
    """Parse a float setting where an empty string disables the limit."""
    value = value.strip()
    return float(value) if value else None


class APIConfig(BaseModel):
    """Service configuration settings."""
    
    # Server settings
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=4211, description="Port to bind to")
    
    # Timeouts
    fetch_timeout_seconds: Optional[float] = Field(
        default=None, description="Per-phase (connect, read, write, pool) timeout for fetching the SVG source, None for no limit"
    )
    keep_alive_timeout_seconds: int = Field(default=600, description="Idle connection timeout")
    shutdown_grace_seconds: int = Field(default=5, description="Grace period for in-flight requests on shutdown")
    
    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @classmethod
    def from_env(cls) -> "APIConfig":
        """Create config from environment variables."""
        return cls(
            host=os.getenv("SVG_RENDER_HOST", "0.0.0.0"),
            port=int(os.getenv("SVG_RENDER_PORT", "4211")),
            fetch_timeout_seconds=_optional_float(os.getenv("SVG_RENDER_FETCH_TIMEOUT", "")),
            keep_alive_timeout_seconds=int(os.getenv("SVG_RENDER_KEEP_ALIVE_TIMEOUT", "600")),
            shutdown_grace_seconds=int(os.getenv("SVG_RENDER_SHUTDOWN_GRACE", "5")),
            log_level=os.getenv("SVG_RENDER_LOG_LEVEL", "INFO"),
            json_logs=os.getenv("SVG_RENDER_JSON_LOGS", "false").lower() in ("1", "true", "yes"),
        )
