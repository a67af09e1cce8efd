"""Per-user unit file generation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

from quadforge.constants import DISTRO_HOME_DIR
from quadforge.loader import Project
from quadforge.models.config import ForgeConfig, UserConfig
from quadforge.resources.base import GeneratedFile, Resource


logger = logging.getLogger(__name__)


@dataclass
class UserArtifacts:
    """Unit files generated for one user."""
    user: str
    home: Path
    files: List[GeneratedFile] = field(default_factory=list)

    def paths(self) -> List[Tuple[Path, GeneratedFile]]:
        """Pair each file with its install path."""
        return [(f.install_path(self.home), f) for f in self.files]


def user_home(config: ForgeConfig, user: str) -> Path:
    """Home directory of a user, placed under ``output_dir`` when set."""
    home_root = DISTRO_HOME_DIR[config.distro]
    if config.output_dir:
        return Path(config.output_dir) / home_root.lstrip("/") / user
    return Path(home_root) / user


class _FileCollector:
    """Collects unit files once each, in the order first requested."""

    def __init__(self):
        self._files: Dict[str, GeneratedFile] = {}

    def add(self, resource: Resource):
        if resource.file_name in self._files:
            return
        self._files[resource.file_name] = resource.file_template()

    def add_volumes(self, volumes):
        for volume in volumes:
            if not volume.is_bind_mount:
                self.add(volume)

    @property
    def files(self) -> List[GeneratedFile]:
        return list(self._files.values())


def collect_user_files(project: Project, user_config: UserConfig) -> List[GeneratedFile]:
    """Generate the files for a user's pods, containers and sockets.

    Each selected resource brings the networks and managed volumes it
    depends on; pods also bring their member containers.
    """
    collector = _FileCollector()

    for pod in project.pods.use(user_config.pods):
        dependencies = pod.get_dependencies()
        for network in dependencies.networks:
            collector.add(network)
        collector.add_volumes(dependencies.volumes)
        collector.add(pod)
        for container in dependencies.containers:
            collector.add_volumes(container.get_dependencies().volumes)
            collector.add(container)

    for container in project.containers.use(user_config.containers):
        dependencies = container.get_dependencies()
        for network in dependencies.networks:
            collector.add(network)
        collector.add_volumes(dependencies.volumes)
        collector.add(container)

    for socket in project.sockets.use(user_config.sockets):
        collector.add(socket)

    return collector.files


def generate_artifacts(project: Union[Project, Callable[[], Project]]) -> List[UserArtifacts]:
    """Generate unit files for every configured user.

    ``project`` may also be a callable returning the project, for builds that
    assemble resources in code.
    """
    if callable(project):
        project = project()

    artifacts = []
    for user, user_config in project.config.users.items():
        files = collect_user_files(project, user_config)
        home = user_home(project.config, user)
        logger.info(f"Generated {len(files)} files for user {user}")
        artifacts.append(UserArtifacts(user=user, home=home, files=files))

    return artifacts
