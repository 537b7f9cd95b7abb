"""Error response schema shared by all /fc endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body: HTTP status code and message."""

    code: int = Field(..., description="HTTP status code")
    error: str
