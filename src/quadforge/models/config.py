"""Configuration models."""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from quadforge.models.container import ContainerSpec
from quadforge.models.network import NetworkConfig
from quadforge.models.pod import PodSpec
from quadforge.models.socket import SocketConfig
from quadforge.models.volume import VolumeConfig


Distro = Literal["ubuntu", "debian", "centos", "fedora-coreos"]


class UserConfig(BaseModel):
    """Quadlet files to generate for one user."""
    model_config = ConfigDict(extra="forbid")

    containers: List[str] = Field(default_factory=list)
    pods: List[str] = Field(default_factory=list)
    sockets: List[str] = Field(default_factory=list)


class ForgeConfig(BaseModel):
    """Main configuration model."""
    model_config = ConfigDict(extra="ignore")

    distro: Distro = Field(..., description="Target distribution, affects home directories")
    users: Dict[str, UserConfig] = Field(default_factory=dict)
    output_dir: Optional[str] = Field(None, description="Root directory for generated files")
    log_level: str = Field(default="INFO")
    strict_networks: bool = Field(default=False, description="Require gateways inside their subnet")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("users")
    @classmethod
    def validate_users(cls, v):
        """User names are lowercased and must be at least 2 characters."""
        users: Dict[str, UserConfig] = {}
        for name, user in v.items():
            if len(name) < 2:
                raise ValueError(f"User name must be at least 2 characters long: {name}")
            lowered = name.lower()
            if lowered in users:
                raise ValueError(f"Duplicate user name: {lowered}")
            users[lowered] = user
        return users


class ProjectSpec(ForgeConfig):
    """A project file: forge configuration plus resource declarations."""
    model_config = ConfigDict(extra="forbid")

    networks: List[NetworkConfig] = Field(default_factory=list)
    volumes: List[VolumeConfig] = Field(default_factory=list)
    sockets: List[SocketConfig] = Field(default_factory=list)
    containers: List[ContainerSpec] = Field(default_factory=list)
    pods: List[PodSpec] = Field(default_factory=list)
