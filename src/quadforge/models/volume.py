"""Volume specification models."""

from typing import Literal, Optional

from pydantic import Field, field_validator

from quadforge.models.base import ResourceConfig


class VolumeConfig(ResourceConfig):
    """Configuration for podman volumes and bind mounts.

    Without ``host_path`` the volume is managed by podman and gets its own
    ``{id}.volume`` unit. With ``host_path`` it is a bind mount from the host
    and no unit file is generated for it.

    ``selinux_label`` controls access: ``z`` shares the mount between
    containers, ``Z`` dedicates it to a single container.
    """
    mount_path: str = Field(..., description="Path where the volume is mounted inside the container")
    host_path: Optional[str] = Field(None, description="Host path for bind mounts")
    selinux_label: Optional[Literal["Z", "z"]] = None

    @field_validator("mount_path", "host_path")
    @classmethod
    def validate_absolute(cls, v, info):
        """Paths must be absolute."""
        if v is not None and not v.startswith("/"):
            raise ValueError(f"{info.field_name} must be an absolute path: {v}")
        return v

    @property
    def is_bind_mount(self) -> bool:
        return self.host_path is not None

    @property
    def resolved_host_path(self) -> str:
        return self.host_path if self.host_path is not None else f"{self.id}.volume"

    @property
    def resolved_mount_path(self) -> str:
        if self.selinux_label:
            return f"{self.mount_path}:{self.selinux_label}"
        return self.mount_path
