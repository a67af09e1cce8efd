"""Podman container resources."""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from quadforge.errors import (
    ContainerAlreadyInPod,
    ContainerDuplicateNetwork,
    ContainerDuplicatePort,
    ContainerDuplicateVolume,
    ContainerMissingDependency,
    ContainerNetworkConflict,
    ContainerVolumeMountConflict,
)
from quadforge.models.base import PortMapping
from quadforge.models.container import ContainerConfig
from quadforge.resources.base import PodRef, Resource, ResourceKind, coerce_config
from quadforge.resources.network import Network
from quadforge.resources.volume import Volume, find_mount_conflict
from quadforge.utils.templates import render_unit


logger = logging.getLogger(__name__)


CONTAINER_TEMPLATE = """\
{% if description %}
[Unit]
Description={{ description }}

{% endif %}
[Container]
ContainerName={{ id }}
Image={{ image }}
{% for network in networks %}
Network={{ network }}
{% endfor %}
{% if pod %}
Pod={{ pod }}
{% endif %}
{% for port in ports %}
Port={{ port.external }}:{{ port.internal }}
{% endfor %}
{% for volume in volumes %}
Volume={{ volume }}
{% endfor %}
"""


@dataclass(frozen=True)
class ContainerDependencies:
    """Snapshot of a container's attached dependencies."""
    networks: Tuple[Network, ...]
    pod: Optional[PodRef]
    ports: Tuple[PortMapping, ...]
    volumes: Tuple[Volume, ...]


class Container(Resource):
    """Container with runtime dependency management.

    Networks, ports and volumes are attached after creation; pod membership
    is set by the owning pod. A container must be on a network or in a pod
    before it can render. Every attach method validates before mutating and
    returns the container for chaining.

    Instances are not thread safe: one builder is expected to be mutated
    from a single thread.
    """

    kind = ResourceKind.CONTAINER

    def __init__(self, config: ContainerConfig):
        super().__init__(config)
        self._networks: List[Network] = []
        self._pod: Optional[PodRef] = None
        self._ports: List[PortMapping] = []
        self._volumes: List[Volume] = []

    def config(self) -> ContainerConfig:
        return self._config

    @property
    def pod(self) -> Optional[PodRef]:
        return self._pod

    @property
    def ports(self) -> Tuple[PortMapping, ...]:
        return tuple(self._ports)

    def add_to_network(self, network: Network, overwrite: bool = False) -> "Container":
        """Connect the container to a network."""
        if self._pod is not None:
            raise ContainerNetworkConflict(self.id, self._pod.id, network.id)
        if overwrite:
            self._networks = [network]
        else:
            if any(n.id == network.id for n in self._networks):
                raise ContainerDuplicateNetwork(self.id, network.id)
            self._networks.append(network)
        logger.debug(f"Container {self.id} joined network {network.id}")
        return self

    def expose_port(self, port: Union[PortMapping, Mapping[str, Any]], overwrite: bool = False) -> "Container":
        """Map an external port on the host or parent pod to a container port."""
        port = coerce_config(PortMapping, port)
        if overwrite:
            self._ports = [port]
        else:
            if any(p.external == port.external for p in self._ports):
                raise ContainerDuplicatePort(self.id, port.external)
            self._ports.append(port)
        logger.debug(f"Container {self.id} exposed port {port.external}:{port.internal}")
        return self

    def add_volume(self, volume: Volume, overwrite: bool = False) -> "Container":
        """Mount a volume in the container."""
        if overwrite:
            self._volumes = [volume]
        else:
            if any(v.id == volume.id for v in self._volumes):
                raise ContainerDuplicateVolume(self.id, volume.id)
            conflict = find_mount_conflict(self._volumes, volume)
            if conflict is not None:
                _, existing_type = conflict
                raise ContainerVolumeMountConflict(
                    self.id, volume.id, volume.config().mount_path, existing_type
                )
            self._volumes.append(volume)
        logger.debug(f"Container {self.id} mounted volume {volume.id}")
        return self

    def _set_pod_ref(self, pod: PodRef) -> "Container":
        """Record pod membership.

        Only called by ``Pod.add_container``.
        """
        if self._networks:
            raise ContainerNetworkConflict(self.id, pod.id)
        if self._pod is not None and self._pod.id != pod.id:
            raise ContainerAlreadyInPod(self.id, self._pod.id, pod.id)
        self._pod = pod
        return self

    def _clear_pod_ref(self) -> None:
        self._pod = None

    def get_dependencies(self) -> ContainerDependencies:
        """Get the current dependencies of the container."""
        return ContainerDependencies(
            networks=tuple(self._networks),
            pod=self._pod,
            ports=tuple(self._ports),
            volumes=tuple(self._volumes),
        )

    def generate_file_template(self) -> str:
        if not self._networks and self._pod is None:
            raise ContainerMissingDependency(self.id)
        return render_unit(
            CONTAINER_TEMPLATE,
            id=self.id,
            image=self._config.image,
            description=self._config.description,
            networks=[n.file_name for n in self._networks],
            pod=self._pod.file_name if self._pod else None,
            ports=self._ports,
            volumes=[v.file_name for v in self._volumes if not v.is_bind_mount],
        )


def create_container(config: Union[ContainerConfig, Mapping[str, Any]]) -> Container:
    """Create a container resource.

    Example::

        caddy = (
            create_container({"id": "caddy", "image": "docker.io/caddy:latest"})
            .expose_port({"external": 80, "internal": 80})
            .add_to_network(app)
        )
    """
    config = coerce_config(ContainerConfig, config)
    return Container(config)
