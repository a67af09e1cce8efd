"""Podman pod resources."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from quadforge.errors import (
    ContainerPortConflictInPod,
    PodDuplicateContainer,
    PodDuplicateNetwork,
    PodDuplicatePort,
    PodDuplicateVolume,
    PodMissingDependency,
    PodPortInUse,
    PodVolumeMountConflict,
)
from quadforge.models.base import PortMapping
from quadforge.models.pod import PodConfig
from quadforge.resources.base import PodRef, Resource, ResourceKind, coerce_config
from quadforge.resources.container import Container
from quadforge.resources.network import Network
from quadforge.resources.volume import Volume, find_mount_conflict
from quadforge.utils.templates import render_unit


logger = logging.getLogger(__name__)


POD_TEMPLATE = """\
{% if description %}
[Unit]
Description={{ description }}

{% endif %}
[Pod]
PodName={{ id }}
{% for network in networks %}
Network={{ network }}
{% endfor %}
{% for port in ports %}
Port={{ port.external }}:{{ port.internal }}
{% endfor %}
{% for volume in volumes %}
Volume={{ volume }}
{% endfor %}
"""


@dataclass(frozen=True)
class PodDependencies:
    """Snapshot of a pod's attached dependencies."""
    networks: Tuple[Network, ...]
    containers: Tuple[Container, ...]
    ports: Tuple[PortMapping, ...]
    volumes: Tuple[Volume, ...]


class Pod(Resource):
    """Pod with runtime dependency management.

    The pod owns its containers and gives them their network. It needs at
    least one network and one container before it can render. Member
    containers are not listed in the pod file; each carries a ``Pod=`` line
    in its own file instead.
    """

    kind = ResourceKind.POD

    def __init__(self, config: PodConfig):
        super().__init__(config)
        self._networks: List[Network] = []
        self._containers: List[Container] = []
        self._ports: List[PortMapping] = []
        self._volumes: List[Volume] = []

    def config(self) -> PodConfig:
        return self._config

    @property
    def ref(self) -> PodRef:
        return PodRef(id=self.id)

    def _port_owner(self, external: int, containers: List[Container]) -> Optional[Container]:
        for container in containers:
            if any(p.external == external for p in container.ports):
                return container
        return None

    def add_container(self, container: Container, overwrite: bool = False) -> "Pod":
        """Add a container to the pod and point it back at the pod."""
        siblings = [] if overwrite else self._containers
        if any(c.id == container.id for c in siblings):
            raise PodDuplicateContainer(self.id, container.id)
        own_ports = {p.external for p in self._ports}
        for port in container.ports:
            if port.external in own_ports or self._port_owner(port.external, siblings):
                raise ContainerPortConflictInPod(container.id, self.id, port.external)

        # Raises before anything is recorded if the container has networks
        container._set_pod_ref(self.ref)

        if overwrite:
            for previous in self._containers:
                if previous is not container:
                    previous._clear_pod_ref()
            self._containers = [container]
        else:
            self._containers.append(container)
        logger.debug(f"Pod {self.id} added container {container.id}")
        return self

    def add_to_network(self, network: Network, overwrite: bool = False) -> "Pod":
        """Connect the pod to a network."""
        if overwrite:
            self._networks = [network]
        else:
            if any(n.id == network.id for n in self._networks):
                raise PodDuplicateNetwork(self.id, network.id)
            self._networks.append(network)
        logger.debug(f"Pod {self.id} joined network {network.id}")
        return self

    def expose_port(self, port: Union[PortMapping, Mapping[str, Any]], overwrite: bool = False) -> "Pod":
        """Expose a port on the pod and map it to an internal port."""
        port = coerce_config(PortMapping, port)
        owner = self._port_owner(port.external, self._containers)
        if owner is not None:
            raise PodPortInUse(self.id, port.external, owner.id)
        if overwrite:
            self._ports = [port]
        else:
            if any(p.external == port.external for p in self._ports):
                raise PodDuplicatePort(self.id, port.external)
            self._ports.append(port)
        logger.debug(f"Pod {self.id} exposed port {port.external}:{port.internal}")
        return self

    def add_volume(self, volume: Volume, overwrite: bool = False) -> "Pod":
        """Mount a volume in the pod."""
        if overwrite:
            self._volumes = [volume]
        else:
            if any(v.id == volume.id for v in self._volumes):
                raise PodDuplicateVolume(self.id, volume.id)
            conflict = find_mount_conflict(self._volumes, volume)
            if conflict is not None:
                _, existing_type = conflict
                raise PodVolumeMountConflict(
                    self.id, volume.id, volume.config().mount_path, existing_type
                )
            self._volumes.append(volume)
        logger.debug(f"Pod {self.id} mounted volume {volume.id}")
        return self

    def get_dependencies(self) -> PodDependencies:
        """Get the current dependencies of the pod."""
        return PodDependencies(
            networks=tuple(self._networks),
            containers=tuple(self._containers),
            ports=tuple(self._ports),
            volumes=tuple(self._volumes),
        )

    def _check_ports(self) -> None:
        """Check that every external port has one owner across the pod.

        Members can expose ports after joining, so attach-time checks
        are not enough.
        """
        claimed: Dict[int, Optional[Container]] = {p.external: None for p in self._ports}
        for container in self._containers:
            for port in container.ports:
                if port.external not in claimed:
                    claimed[port.external] = container
                    continue
                if claimed[port.external] is None:
                    raise PodPortInUse(self.id, port.external, container.id)
                raise ContainerPortConflictInPod(container.id, self.id, port.external)

    def generate_file_template(self) -> str:
        if not self._networks or not self._containers:
            raise PodMissingDependency(self.id)
        self._check_ports()
        return render_unit(
            POD_TEMPLATE,
            id=self.id,
            description=self._config.description,
            networks=[n.file_name for n in self._networks],
            ports=self._ports,
            volumes=[v.file_name for v in self._volumes if not v.is_bind_mount],
        )


def create_pod(config: Union[PodConfig, Mapping[str, Any]]) -> Pod:
    """Create a pod resource.

    Example::

        wordpress = (
            create_pod({"id": "wordpress", "description": "Wordpress and its database"})
            .add_to_network(app)
            .expose_port({"external": 80, "internal": 80})
            .add_container(web)
            .add_container(db)
        )
    """
    config = coerce_config(PodConfig, config)
    return Pod(config)
