"""Pydantic models for API request/response schemas."""

from typing import List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    allowed_nameservers: int
    resolvers: List[str] = Field(default_factory=list)
    query_resolver: str
