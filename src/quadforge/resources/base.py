"""Base resource interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, NamedTuple, Type, TypeVar, Union

from pydantic import BaseModel

from quadforge.constants import PODMAN_PATHS


ConfigT = TypeVar("ConfigT", bound=BaseModel)


class ResourceKind(str, Enum):
    """Kinds of generated units."""
    CONTAINER = "container"
    POD = "pod"
    NETWORK = "network"
    VOLUME = "volume"
    SOCKET = "socket"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def output_dir(self) -> str:
        """Install directory relative to the user's home."""
        if self is ResourceKind.SOCKET:
            return PODMAN_PATHS["systemd"]
        return PODMAN_PATHS["quadlet"]


class PodRef(NamedTuple):
    """Weak reference from a container to the pod that owns it."""
    id: str
    kind: ResourceKind = ResourceKind.POD

    @property
    def file_name(self) -> str:
        return f"{self.id}.{self.kind.extension}"


@dataclass(frozen=True)
class GeneratedFile:
    """A rendered unit file and where it belongs."""
    file_name: str
    output_dir: str
    contents: str

    def install_path(self, home: Union[str, Path]) -> Path:
        """Full path of the file under the given home directory."""
        return Path(home) / self.output_dir / self.file_name


def coerce_config(model: Type[ConfigT], config: Union[ConfigT, Mapping[str, Any]]) -> ConfigT:
    """Accept either a validated model or a plain mapping."""
    if isinstance(config, model):
        return config
    if isinstance(config, Mapping):
        return model.model_validate(dict(config))
    raise TypeError(f"Expected {model.__name__} or mapping, got {type(config).__name__}")


class Resource(ABC):
    """Base resource that every unit kind implements.

    A resource is identified by ``id`` within its kind and renders to the
    text of one unit file. Configuration is immutable once created.
    """

    kind: ResourceKind

    def __init__(self, config: BaseModel):
        self._config = config

    @property
    def id(self) -> str:
        return self._config.id

    @property
    def file_name(self) -> str:
        return f"{self.id}.{self.kind.extension}"

    def config(self):
        """Get the resource configuration."""
        return self._config

    @abstractmethod
    def generate_file_template(self) -> str:
        """Render the unit file contents."""
        pass

    def render(self) -> str:
        return self.generate_file_template()

    def file_template(self) -> GeneratedFile:
        """Get the unit file with its install location."""
        return GeneratedFile(
            file_name=self.file_name,
            output_dir=self.kind.output_dir,
            contents=self.generate_file_template(),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id!r}>"
