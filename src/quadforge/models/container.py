"""Container specification models."""

from typing import List, Optional

from pydantic import Field

from quadforge.models.base import PortMapping, ResourceConfig


class ContainerConfig(ResourceConfig):
    """Container configuration."""
    image: str = Field(..., min_length=1, description="Image reference to run")
    description: Optional[str] = None


class ContainerSpec(ContainerConfig):
    """Container declaration in a project file, with dependencies by id."""
    networks: List[str] = Field(default_factory=list)
    ports: List[PortMapping] = Field(default_factory=list)
    volumes: List[str] = Field(default_factory=list)

    def to_config(self) -> ContainerConfig:
        return ContainerConfig(id=self.id, image=self.image, description=self.description)
