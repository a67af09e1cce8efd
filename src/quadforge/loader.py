"""Project file loading and resource graph construction."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from pydantic import ValidationError

from quadforge.models.config import ForgeConfig, ProjectSpec
from quadforge.resources.base import Resource, ResourceKind
from quadforge.resources.registry import (
    ResourceRegistry,
    register_containers,
    register_networks,
    register_pods,
    register_sockets,
    register_volumes,
)


logger = logging.getLogger(__name__)


@dataclass
class Project:
    """A built resource graph with the configuration that selects from it."""
    config: ForgeConfig
    networks: ResourceRegistry
    volumes: ResourceRegistry
    sockets: ResourceRegistry
    containers: ResourceRegistry
    pods: ResourceRegistry

    def registry(self, kind: Union[ResourceKind, str]) -> ResourceRegistry:
        """Get the registry for a resource kind."""
        registries = {
            ResourceKind.NETWORK: self.networks,
            ResourceKind.VOLUME: self.volumes,
            ResourceKind.SOCKET: self.sockets,
            ResourceKind.CONTAINER: self.containers,
            ResourceKind.POD: self.pods,
        }
        return registries[ResourceKind(kind)]

    def resources(self) -> Iterator[Resource]:
        """Iterate over every registered resource, leaves first."""
        for registry in (self.networks, self.volumes, self.sockets, self.containers, self.pods):
            yield from registry


def build_project(spec: ProjectSpec) -> Project:
    """Build the resource graph described by a project spec.

    Dependencies are resolved through the registries, so unknown or repeated
    references fail the same way they would in hand-written code.
    """
    networks = register_networks(spec.networks, strict=spec.strict_networks)
    volumes = register_volumes(spec.volumes)
    sockets = register_sockets(spec.sockets)
    containers = register_containers([c.to_config() for c in spec.containers])
    pods = register_pods([p.to_config() for p in spec.pods])

    for container_spec in spec.containers:
        container = containers.get(container_spec.id)
        for network in networks.use(container_spec.networks):
            container.add_to_network(network)
        for port in container_spec.ports:
            container.expose_port(port)
        for volume in volumes.use(container_spec.volumes):
            container.add_volume(volume)

    for pod_spec in spec.pods:
        pod = pods.get(pod_spec.id)
        for network in networks.use(pod_spec.networks):
            pod.add_to_network(network)
        for port in pod_spec.ports:
            pod.expose_port(port)
        for volume in volumes.use(pod_spec.volumes):
            pod.add_volume(volume)
        for container in containers.use(pod_spec.containers):
            pod.add_container(container)

    logger.info(
        f"Built project: {len(networks)} networks, {len(volumes)} volumes, "
        f"{len(sockets)} sockets, {len(containers)} containers, {len(pods)} pods"
    )
    return Project(
        config=spec,
        networks=networks,
        volumes=volumes,
        sockets=sockets,
        containers=containers,
        pods=pods,
    )


class ProjectLoader:
    """Loads a project file and builds its resource graph."""

    def __init__(self, project_file: Union[str, Path]):
        """Initialize project loader."""
        self.project_file = Path(project_file)
        self.yaml = YAML()
        self.yaml.preserve_quotes = True
        self.spec: Optional[ProjectSpec] = None

    def load(self) -> ProjectSpec:
        """Load and validate the project file."""
        if not self.project_file.exists():
            raise FileNotFoundError(f"Project file not found: {self.project_file}")

        logger.info(f"Loading project from {self.project_file}")
        data = self._read_yaml(self.project_file)

        try:
            self.spec = ProjectSpec.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid project file {self.project_file}: {e}")
            raise

        return self.spec

    def build(self) -> Project:
        """Load the project file and build its resources."""
        return build_project(self.load())

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            data = self.yaml.load(file_path.read_text())
        except YAMLError as e:
            logger.error(f"Error parsing {file_path}: {e}")
            raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Project file must contain a mapping: {file_path}")
        return data
