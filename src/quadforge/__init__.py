"""
Quadforge - Podman quadlet and systemd socket unit generation.

Describe containers, pods, networks, volumes and sockets as typed resources,
wire them together, and render the unit files systemd and Podman expect.
"""

__version__ = "0.1.0"

# Re-export key components for easier access
from quadforge.errors import QuadforgeError
from quadforge.generator import generate_artifacts
from quadforge.loader import ProjectLoader, build_project
from quadforge.resources import (
    ResourceKind,
    create_container,
    create_network,
    create_pod,
    create_socket,
    create_volume,
    register_containers,
    register_networks,
    register_pods,
    register_sockets,
    register_volumes,
)

__all__ = [
    "QuadforgeError",
    "generate_artifacts",
    "ProjectLoader",
    "build_project",
    "ResourceKind",
    "create_container",
    "create_network",
    "create_pod",
    "create_socket",
    "create_volume",
    "register_containers",
    "register_networks",
    "register_pods",
    "register_sockets",
    "register_volumes",
]
