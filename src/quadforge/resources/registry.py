"""Resource registries for selecting resources by id."""

import functools
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from quadforge.errors import DuplicateResourceId, DuplicateResourceRequest, InvalidResourceName
from quadforge.resources.base import GeneratedFile, Resource, ResourceKind
from quadforge.resources.container import create_container
from quadforge.resources.network import create_network
from quadforge.resources.pod import create_pod
from quadforge.resources.socket import create_socket
from quadforge.resources.volume import create_volume


logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Registry of same-kind resources keyed by unique id."""

    def __init__(
        self,
        kind: ResourceKind,
        factory: Callable[[Any], Resource],
        configs: Iterable[Any] = (),
    ):
        """Initialize registry and register the given configs."""
        self.kind = ResourceKind(kind)
        self._factory = factory
        self._resources: Dict[str, Resource] = {}

        for config in configs:
            self.register(config)

    def register(self, config: Any) -> Resource:
        """Create a resource from its config and register it."""
        resource = self._factory(config)
        if resource.id in self._resources:
            raise DuplicateResourceId(self.kind.value, resource.id)

        self._resources[resource.id] = resource
        logger.debug(f"Registered {self.kind.value}: {resource.id}")
        return resource

    def use(self, ids: Iterable[str]) -> List[Resource]:
        """Select resources by id, in the order requested."""
        if isinstance(ids, str):
            raise TypeError(f"Expected a list of {self.kind.value} ids, got string {ids!r}")

        selected: List[Resource] = []
        seen = set()
        for resource_id in ids:
            if resource_id in seen:
                raise DuplicateResourceRequest(self.kind.value, resource_id)
            seen.add(resource_id)

            resource = self._resources.get(resource_id)
            if resource is None:
                raise InvalidResourceName(self.kind.value, resource_id)
            selected.append(resource)

        return selected

    def file_templates(self, ids: Iterable[str]) -> List[GeneratedFile]:
        """Get the unit files for the selected resources."""
        return [resource.file_template() for resource in self.use(ids)]

    def get(self, resource_id: str) -> Optional[Resource]:
        """Get a resource by id."""
        return self._resources.get(resource_id)

    def ids(self) -> List[str]:
        """List registered ids in registration order."""
        return list(self._resources.keys())

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())


def register_networks(configs: Iterable[Any], strict: bool = False) -> ResourceRegistry:
    """Register network configs.

    Example::

        networks = register_networks([
            {"id": "internal", "subnet": "10.89.0.0/24", "gateway": "10.89.0.1"},
            {"id": "external", "subnet": "10.89.1.0/24", "gateway": "10.89.1.1"},
        ])
        internal, external = networks.use(["internal", "external"])
    """
    factory = functools.partial(create_network, strict=strict)
    return ResourceRegistry(ResourceKind.NETWORK, factory, configs)


def register_volumes(configs: Iterable[Any]) -> ResourceRegistry:
    """Register volume configs."""
    return ResourceRegistry(ResourceKind.VOLUME, create_volume, configs)


def register_sockets(configs: Iterable[Any]) -> ResourceRegistry:
    """Register socket configs."""
    return ResourceRegistry(ResourceKind.SOCKET, create_socket, configs)


def register_containers(configs: Iterable[Any]) -> ResourceRegistry:
    """Register container configs."""
    return ResourceRegistry(ResourceKind.CONTAINER, create_container, configs)


def register_pods(configs: Iterable[Any]) -> ResourceRegistry:
    """Register pod configs."""
    return ResourceRegistry(ResourceKind.POD, create_pod, configs)
