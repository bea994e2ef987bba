"""Rendered response domain model."""

from pydantic import BaseModel, ConfigDict, Field


class RenderedResponse(BaseModel):
    """A fully rendered response ready to be written by the transport."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    content_type: str
    body: bytes
    headers: dict[str, str] = Field(default_factory=dict)
