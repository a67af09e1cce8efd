"""Pod specification models."""

from typing import List, Optional

from pydantic import Field

from quadforge.models.base import PortMapping, ResourceConfig


class PodConfig(ResourceConfig):
    """Pod configuration."""
    description: Optional[str] = None


class PodSpec(PodConfig):
    """Pod declaration in a project file, with dependencies by id."""
    networks: List[str] = Field(default_factory=list)
    containers: List[str] = Field(default_factory=list)
    ports: List[PortMapping] = Field(default_factory=list)
    volumes: List[str] = Field(default_factory=list)

    def to_config(self) -> PodConfig:
        return PodConfig(id=self.id, description=self.description)
