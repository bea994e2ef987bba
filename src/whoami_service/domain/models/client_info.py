"""Client information domain model."""

from pydantic import BaseModel, ConfigDict, Field


class ClientInfo(BaseModel):
    """Client information extracted from a single inbound request.

    ``headers`` maps each header name, as delivered by the transport, to its
    text value. Headers whose value is not valid text are absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ip: str
    user_agent: str = Field(alias="userAgent")
    headers: dict[str, str] = Field(default_factory=dict)
