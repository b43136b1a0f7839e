"""Dashboard configuration schemas."""

from datetime import datetime
from pydantic import Field

from vipudev.models.schemas.base import CamelModel


class UserConfigUpdate(CamelModel):
    """Schema for saving the dashboard configuration."""

    backend_url: str | None = Field(None, max_length=500)
    api_key: str | None = None


class UserConfigResponse(UserConfigUpdate):
    """Schema for configuration response; `api_key` is returned decrypted."""

    id: int
    updated_at: datetime


class UserConfigEnvelope(CamelModel):
    # Empty object when nothing has been saved yet
    config: UserConfigResponse | dict
