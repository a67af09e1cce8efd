"""Errors raised while building and rendering resources.

Every error carries a stable ``code`` for callers that need to branch on the
failure, and a message naming the resources involved.
"""

from typing import Optional


class QuadforgeError(Exception):
    """Base error for quadforge."""
    code = "quadforge_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ResourceIdentityError(QuadforgeError):
    """Resource ids that are duplicated or unknown."""
    code = "resource_identity"


class AttachmentConflictError(QuadforgeError):
    """A dependency could not be attached to a container or pod."""
    code = "attachment_conflict"


class IncompleteResourceError(QuadforgeError):
    """A resource cannot produce a unit file in its current state."""
    code = "incomplete_resource"


# Registry errors

class DuplicateResourceId(ResourceIdentityError):
    """Two resources of the same kind share an id."""
    code = "duplicate_resource_id"

    def __init__(self, kind: str, resource_id: str):
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f'{kind.capitalize()} "{resource_id}" already exists')


class DuplicateResourceRequest(DuplicateResourceId):
    """The same id was requested twice in one selection."""
    code = "duplicate_resource_request"

    def __init__(self, kind: str, resource_id: str):
        super().__init__(kind, resource_id)
        self.message = f'{kind.capitalize()} "{resource_id}" was requested more than once'
        self.args = (self.message,)


class InvalidResourceName(ResourceIdentityError):
    """A requested id is not registered."""
    code = "invalid_resource_name"

    def __init__(self, kind: str, resource_id: str):
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f'{kind.capitalize()} "{resource_id}" not found')


# Network errors

class NetworkGatewayOutOfRange(QuadforgeError):
    """Gateway address outside the network's subnet."""
    code = "network_gateway_out_of_range"

    def __init__(self, network_id: str, gateway: str, subnet: str):
        self.network_id = network_id
        super().__init__(
            f'Network "{network_id}" gateway "{gateway}" must be within subnet "{subnet}"'
        )


# Volume errors

class BindMountTemplateError(IncompleteResourceError):
    """Bind mounts never produce a .volume unit."""
    code = "volume_bind_mount_template"

    def __init__(self, volume_id: str):
        self.volume_id = volume_id
        super().__init__(
            f'Cannot get a quadlet template for bind mount "{volume_id}" - '
            f"only podman-managed volumes generate template files"
        )


# Container errors

class ContainerNetworkConflict(AttachmentConflictError):
    """Networks and pod membership are mutually exclusive."""
    code = "container_network_in_pod"

    def __init__(self, container_id: str, pod_id: str, network_id: Optional[str] = None):
        self.container_id = container_id
        self.pod_id = pod_id
        self.network_id = network_id
        if network_id is not None:
            message = (
                f'Container "{container_id}" can\'t join network "{network_id}" - '
                f'It\'s part of pod "{pod_id}". Use pod networking instead'
            )
        else:
            message = (
                f'Container "{container_id}" can\'t join pod "{pod_id}" - '
                f"It is already connected to networks"
            )
        super().__init__(message)


class ContainerDuplicateNetwork(AttachmentConflictError):
    code = "container_duplicate_network"

    def __init__(self, container_id: str, network_id: str):
        self.container_id = container_id
        self.network_id = network_id
        super().__init__(
            f'Container "{container_id}" is already connected to network "{network_id}"'
        )


class ContainerDuplicatePort(AttachmentConflictError):
    code = "container_duplicate_port"

    def __init__(self, container_id: str, port: int):
        self.container_id = container_id
        self.port = port
        super().__init__(
            f'Container "{container_id}" is trying to expose port "{port}" multiple times'
        )


class ContainerDuplicateVolume(AttachmentConflictError):
    code = "container_duplicate_volume"

    def __init__(self, container_id: str, volume_id: str):
        self.container_id = container_id
        self.volume_id = volume_id
        super().__init__(
            f'Container "{container_id}" already mounts volume "{volume_id}"'
        )


class ContainerVolumeMountConflict(AttachmentConflictError):
    code = "container_volume_mount_conflict"

    def __init__(self, container_id: str, volume_id: str, target: str, existing_type: str):
        self.container_id = container_id
        self.volume_id = volume_id
        self.target = target
        super().__init__(
            f'Container "{container_id}" - Volume "{volume_id}" mount at "{target}" '
            f"conflicts with existing {existing_type} mount"
        )


class ContainerPortConflictInPod(AttachmentConflictError):
    code = "container_port_conflict_in_pod"

    def __init__(self, container_id: str, pod_id: str, port: int):
        self.container_id = container_id
        self.pod_id = pod_id
        self.port = port
        super().__init__(
            f'Container "{container_id}" - Port "{port}" already in use '
            f'by another container in pod "{pod_id}"'
        )


class ContainerAlreadyInPod(AttachmentConflictError):
    code = "container_already_in_pod"

    def __init__(self, container_id: str, pod_id: str, new_pod_id: str):
        self.container_id = container_id
        self.pod_id = pod_id
        self.new_pod_id = new_pod_id
        super().__init__(
            f'Container "{container_id}" can\'t join pod "{new_pod_id}" - '
            f'It\'s already part of pod "{pod_id}"'
        )


class ContainerMissingDependency(IncompleteResourceError):
    code = "container_missing_dependency"

    def __init__(self, container_id: str):
        self.container_id = container_id
        super().__init__(
            f'Container "{container_id}" must have either networks or pod attached'
        )


# Pod errors

class PodDuplicateContainer(AttachmentConflictError):
    code = "pod_duplicate_container"

    def __init__(self, pod_id: str, container_id: str):
        self.pod_id = pod_id
        self.container_id = container_id
        super().__init__(f'Pod "{pod_id}" already contains container "{container_id}"')


class PodDuplicateNetwork(AttachmentConflictError):
    code = "pod_duplicate_network"

    def __init__(self, pod_id: str, network_id: str):
        self.pod_id = pod_id
        self.network_id = network_id
        super().__init__(f'Pod "{pod_id}" is already connected to network "{network_id}"')


class PodDuplicatePort(AttachmentConflictError):
    code = "pod_duplicate_port"

    def __init__(self, pod_id: str, port: int):
        self.pod_id = pod_id
        self.port = port
        super().__init__(f'Pod "{pod_id}" is already exposing port "{port}"')


class PodPortInUse(AttachmentConflictError):
    code = "pod_port_in_use"

    def __init__(self, pod_id: str, port: int, container_id: str):
        self.pod_id = pod_id
        self.port = port
        self.container_id = container_id
        super().__init__(
            f'Pod "{pod_id}" - Port "{port}" already in use by container "{container_id}"'
        )


class PodDuplicateVolume(AttachmentConflictError):
    code = "pod_duplicate_volume"

    def __init__(self, pod_id: str, volume_id: str):
        self.pod_id = pod_id
        self.volume_id = volume_id
        super().__init__(f'Pod "{pod_id}" already mounts volume "{volume_id}"')


class PodVolumeMountConflict(AttachmentConflictError):
    code = "pod_volume_mount_conflict"

    def __init__(self, pod_id: str, volume_id: str, target: str, existing_type: str):
        self.pod_id = pod_id
        self.volume_id = volume_id
        self.target = target
        super().__init__(
            f'Pod "{pod_id}" - Volume "{volume_id}" mount at "{target}" '
            f"conflicts with existing {existing_type} mount"
        )


class PodMissingDependency(IncompleteResourceError):
    code = "pod_missing_dependency"

    def __init__(self, pod_id: str):
        self.pod_id = pod_id
        super().__init__(
            f'Pod "{pod_id}" must have at least 1 network and 1 container attached'
        )
