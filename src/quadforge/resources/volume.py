"""Podman volume resources."""

import logging
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from quadforge.errors import BindMountTemplateError
from quadforge.models.volume import VolumeConfig
from quadforge.resources.base import GeneratedFile, Resource, ResourceKind, coerce_config
from quadforge.utils.templates import render_unit


logger = logging.getLogger(__name__)


VOLUME_TEMPLATE = """\
[Volume]
VolumeName={{ id }}
"""


class Volume(Resource):
    """A podman-managed volume or a host bind mount.

    Bind mounts are referenced by host path and never produce a unit file.
    """

    kind = ResourceKind.VOLUME

    def config(self) -> VolumeConfig:
        return self._config

    @property
    def is_bind_mount(self) -> bool:
        return self._config.is_bind_mount

    def generate_file_template(self) -> str:
        if self.is_bind_mount:
            return ""
        return render_unit(VOLUME_TEMPLATE, id=self.id)

    def file_template(self) -> GeneratedFile:
        if self.is_bind_mount:
            raise BindMountTemplateError(self.id)
        return super().file_template()


def create_volume(config: Union[VolumeConfig, Mapping[str, Any]]) -> Volume:
    """Create a volume resource."""
    config = coerce_config(VolumeConfig, config)
    logger.debug(f"Created volume {config.id} at {config.mount_path}")
    return Volume(config)


def find_mount_conflict(mounted: Iterable[Volume], volume: Volume) -> Optional[Tuple[Volume, str]]:
    """Find a mounted volume that can't share a mount path with ``volume``.

    Only two shared (``z``) mounts may use the same path. Returns the
    conflicting volume and whether its mount is private or shared.
    """
    target = volume.config().mount_path
    for existing in mounted:
        existing_config = existing.config()
        if existing_config.mount_path != target:
            continue
        if existing_config.selinux_label == "z" and volume.config().selinux_label == "z":
            continue
        existing_type = "shared" if existing_config.selinux_label == "z" else "private"
        return existing, existing_type
    return None
