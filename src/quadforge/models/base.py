"""Shared resource configuration models."""

from pydantic import BaseModel, ConfigDict, Field


class ResourceConfig(BaseModel):
    """Base configuration for every generated unit."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Unique identifier, used as the unit name")


class PortMapping(BaseModel):
    """Ports to expose on a container or pod."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    external: int = Field(..., ge=1, le=65535, description="Port on the host, or on the pod for pod members")
    internal: int = Field(..., ge=1, le=65535, description="Port inside the container")
