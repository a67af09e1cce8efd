"""Systemd socket specification models."""

from typing import Annotated, List

from pydantic import Field, field_validator

from quadforge.models.base import ResourceConfig


Port = Annotated[int, Field(ge=1, le=65535)]


class SocketConfig(ResourceConfig):
    """Configuration for a systemd .socket unit."""
    activate_service: str = Field(
        ...,
        min_length=1,
        description="Service the socket activates, without the .service extension",
    )
    ports: List[Port] = Field(..., min_length=1, description="Ports the socket listens on")

    @field_validator("activate_service")
    @classmethod
    def validate_service_name(cls, v):
        """Reject names that already carry the unit suffix."""
        if v.endswith(".service"):
            raise ValueError(f"activate_service must not include the .service extension: {v}")
        return v
