"""Unit file resources for quadforge."""

from quadforge.resources.base import GeneratedFile, PodRef, Resource, ResourceKind
from quadforge.resources.container import Container, ContainerDependencies, create_container
from quadforge.resources.network import Network, create_network
from quadforge.resources.pod import Pod, PodDependencies, create_pod
from quadforge.resources.registry import (
    ResourceRegistry,
    register_containers,
    register_networks,
    register_pods,
    register_sockets,
    register_volumes,
)
from quadforge.resources.socket import Socket, create_socket
from quadforge.resources.volume import Volume, create_volume

__all__ = [
    "GeneratedFile",
    "PodRef",
    "Resource",
    "ResourceKind",
    "Container",
    "ContainerDependencies",
    "create_container",
    "Network",
    "create_network",
    "Pod",
    "PodDependencies",
    "create_pod",
    "ResourceRegistry",
    "register_containers",
    "register_networks",
    "register_pods",
    "register_sockets",
    "register_volumes",
    "Socket",
    "create_socket",
    "Volume",
    "create_volume",
]
