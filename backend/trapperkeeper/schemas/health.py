"""
Trapper Keeper Backend — Health Response Schema
================================================

What:  Response model for GET /health.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status for container health checks and load balancers."""

    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in the store")
    uptime_seconds: float = Field(description="Seconds since service started")
