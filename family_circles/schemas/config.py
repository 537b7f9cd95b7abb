"""Config API schemas."""

from pydantic import BaseModel, Field


class ApiCapabilities(BaseModel):
    """Operations the API offers, grouped by access mode."""

    read: list[str] = Field(default_factory=list)


class ConfigResponse(BaseModel):
    """Response for GET /fc/config."""

    api: ApiCapabilities = Field(default_factory=ApiCapabilities)
