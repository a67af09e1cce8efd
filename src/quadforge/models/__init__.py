"""Pydantic models for configuration and validation."""

from quadforge.models.base import ResourceConfig, PortMapping
from quadforge.models.config import ForgeConfig, UserConfig, ProjectSpec
from quadforge.models.container import ContainerConfig, ContainerSpec
from quadforge.models.network import NetworkConfig
from quadforge.models.pod import PodConfig, PodSpec
from quadforge.models.socket import SocketConfig
from quadforge.models.volume import VolumeConfig

__all__ = [
    "ResourceConfig",
    "PortMapping",
    "ForgeConfig",
    "UserConfig",
    "ProjectSpec",
    "ContainerConfig",
    "ContainerSpec",
    "NetworkConfig",
    "PodConfig",
    "PodSpec",
    "SocketConfig",
    "VolumeConfig",
]
