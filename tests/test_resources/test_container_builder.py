"""Tests for container resources."""

import pytest

from quadforge.errors import (
    AttachmentConflictError,
    ContainerAlreadyInPod,
    ContainerDuplicateNetwork,
    ContainerDuplicatePort,
    ContainerDuplicateVolume,
    ContainerMissingDependency,
    ContainerNetworkConflict,
    ContainerVolumeMountConflict,
)
from quadforge.models.base import PortMapping
from quadforge.resources.base import PodRef, ResourceKind
from quadforge.resources.container import create_container
from quadforge.resources.network import create_network
from quadforge.resources.volume import create_volume


@pytest.fixture
def app_network():
    return create_network({"id": "app", "subnet": "10.89.0.0/24", "gateway": "10.89.0.1"})


@pytest.fixture
def db_network():
    return create_network({"id": "db", "subnet": "10.89.1.0/24", "gateway": "10.89.1.1"})


@pytest.fixture
def caddy():
    return create_container({"id": "caddy", "image": "docker.io/caddy:latest"})


class TestContainerRendering:
    """Test container unit generation."""

    def test_caddy_example(self, caddy, app_network):
        """Test the documented caddy container."""
        caddy.expose_port({"external": 80, "internal": 80}).add_to_network(app_network)

        assert caddy.generate_file_template() == (
            "[Container]\n"
            "ContainerName=caddy\n"
            "Image=docker.io/caddy:latest\n"
            "Network=app.network\n"
            "Port=80:80"
        )

    def test_missing_dependency(self, caddy):
        """Test that a container needs a network or pod to render."""
        with pytest.raises(ContainerMissingDependency) as exc_info:
            caddy.generate_file_template()

        assert exc_info.value.code == "container_missing_dependency"
        assert '"caddy"' in str(exc_info.value)

    def test_single_network_line(self, caddy, app_network):
        """Test exactly one Network line for one network."""
        caddy.add_to_network(app_network)
        lines = caddy.generate_file_template().splitlines()

        assert [l for l in lines if l.startswith("Network=")] == ["Network=app.network"]

    def test_line_order(self, caddy, app_network, db_network):
        """Test networks, then ports, then volumes."""
        data = create_volume({"id": "data", "mount_path": "/data", "selinux_label": "Z"})
        caddy.add_volume(data)
        caddy.expose_port({"external": 443, "internal": 8443})
        caddy.add_to_network(app_network).add_to_network(db_network)

        assert caddy.generate_file_template().splitlines()[3:] == [
            "Network=app.network",
            "Network=db.network",
            "Port=443:8443",
            "Volume=data.volume",
        ]

    def test_volume_lines_only_for_managed_volumes(self, caddy, app_network):
        """Test that only managed volumes get a Volume line."""
        data = create_volume({"id": "data", "mount_path": "/data"})
        config = create_volume({"id": "config", "mount_path": "/etc/caddy", "host_path": "/srv/caddy"})
        caddy.add_to_network(app_network).add_volume(data).add_volume(config)
        lines = caddy.generate_file_template().splitlines()

        assert [l for l in lines if l.startswith("Volume=")] == ["Volume=data.volume"]
        assert [v.id for v in caddy.get_dependencies().volumes] == ["data", "config"]

    def test_pod_member_rendering(self, caddy):
        """Test the Pod line for pod members."""
        caddy._set_pod_ref(PodRef(id="web"))

        assert caddy.generate_file_template() == (
            "[Container]\n"
            "ContainerName=caddy\n"
            "Image=docker.io/caddy:latest\n"
            "Pod=web.pod"
        )

    def test_description_adds_unit_section(self, app_network):
        """Test the optional Unit section."""
        container = create_container({
            "id": "caddy",
            "image": "docker.io/caddy:latest",
            "description": "Caddy web server",
        }).add_to_network(app_network)

        assert container.generate_file_template().startswith(
            "[Unit]\nDescription=Caddy web server\n\n[Container]\nContainerName=caddy\n"
        )

    def test_file_template(self, caddy, app_network):
        """Test container file name and location."""
        generated = caddy.add_to_network(app_network).file_template()

        assert caddy.kind is ResourceKind.CONTAINER
        assert generated.file_name == "caddy.container"
        assert generated.output_dir == ".config/containers/systemd"


class TestContainerNetworks:
    """Test network attachment."""

    def test_chaining_returns_container(self, caddy, app_network):
        """Test that attach methods return the same container."""
        assert caddy.add_to_network(app_network) is caddy

    def test_duplicate_network(self, caddy, app_network):
        """Test attaching the same network twice."""
        caddy.add_to_network(app_network)

        with pytest.raises(ContainerDuplicateNetwork) as exc_info:
            caddy.add_to_network(app_network)

        assert exc_info.value.code == "container_duplicate_network"
        assert len(caddy.get_dependencies().networks) == 1

    def test_overwrite_replaces_networks(self, caddy, app_network, db_network):
        """Test replacing the network list."""
        caddy.add_to_network(app_network).add_to_network(db_network)
        caddy.add_to_network(app_network, overwrite=True)

        assert [n.id for n in caddy.get_dependencies().networks] == ["app"]

    def test_network_rejected_in_pod(self, caddy, app_network):
        """Test that pod members cannot join networks."""
        caddy._set_pod_ref(PodRef(id="web"))

        with pytest.raises(ContainerNetworkConflict) as exc_info:
            caddy.add_to_network(app_network)

        assert exc_info.value.code == "container_network_in_pod"
        assert '"web"' in str(exc_info.value)
        assert caddy.get_dependencies().networks == ()

    def test_network_rejected_in_pod_even_when_overwriting(self, caddy, app_network):
        """Test that overwrite does not bypass pod exclusivity."""
        caddy._set_pod_ref(PodRef(id="web"))

        with pytest.raises(ContainerNetworkConflict):
            caddy.add_to_network(app_network, overwrite=True)


class TestContainerPorts:
    """Test port exposure."""

    def test_duplicate_port(self, caddy):
        """Test exposing the same external port twice."""
        caddy.expose_port({"external": 80, "internal": 80})

        with pytest.raises(ContainerDuplicatePort) as exc_info:
            caddy.expose_port({"external": 80, "internal": 80})

        error = exc_info.value
        assert error.code == "container_duplicate_port"
        assert error.container_id == "caddy"
        assert error.port == 80
        assert '"caddy"' in str(error) and '"80"' in str(error)
        assert caddy.get_dependencies().ports == (PortMapping(external=80, internal=80),)

    def test_same_internal_port_different_external(self, caddy):
        """Test that only external ports must be unique."""
        caddy.expose_port({"external": 80, "internal": 8080})
        caddy.expose_port(PortMapping(external=81, internal=8080))

        assert len(caddy.get_dependencies().ports) == 2

    def test_overwrite_ports(self, caddy):
        """Test replacing the port list."""
        caddy.expose_port({"external": 80, "internal": 80})
        caddy.expose_port({"external": 80, "internal": 8080}, overwrite=True)

        assert caddy.get_dependencies().ports == (PortMapping(external=80, internal=8080),)


class TestContainerVolumes:
    """Test volume attachment."""

    def test_duplicate_volume(self, caddy):
        """Test mounting the same volume twice."""
        data = create_volume({"id": "data", "mount_path": "/data"})
        caddy.add_volume(data)

        with pytest.raises(ContainerDuplicateVolume):
            caddy.add_volume(data)

    def test_private_mount_conflict(self, caddy):
        """Test two private mounts at the same path."""
        caddy.add_volume(create_volume({"id": "a", "mount_path": "/data", "selinux_label": "Z"}))

        with pytest.raises(ContainerVolumeMountConflict) as exc_info:
            caddy.add_volume(create_volume({"id": "b", "mount_path": "/data", "selinux_label": "Z"}))

        assert "private" in str(exc_info.value)
        assert [v.id for v in caddy.get_dependencies().volumes] == ["a"]

    def test_private_and_shared_conflict(self, caddy):
        """Test a shared mount over a private one and vice versa."""
        caddy.add_volume(create_volume({"id": "a", "mount_path": "/data", "selinux_label": "z"}))

        with pytest.raises(ContainerVolumeMountConflict) as exc_info:
            caddy.add_volume(create_volume({"id": "b", "mount_path": "/data", "selinux_label": "Z"}))

        assert "shared" in str(exc_info.value)

    def test_shared_mounts_allowed(self, caddy):
        """Test two shared mounts at the same path."""
        caddy.add_volume(create_volume({"id": "a", "mount_path": "/data", "selinux_label": "z"}))
        caddy.add_volume(create_volume({"id": "b", "mount_path": "/data", "selinux_label": "z"}))

        assert len(caddy.get_dependencies().volumes) == 2

    def test_different_paths_allowed(self, caddy):
        """Test private mounts at different paths."""
        caddy.add_volume(create_volume({"id": "a", "mount_path": "/a", "selinux_label": "Z"}))
        caddy.add_volume(create_volume({"id": "b", "mount_path": "/b", "selinux_label": "Z"}))

        assert len(caddy.get_dependencies().volumes) == 2


class TestContainerPodRef:
    """Test pod back-references."""

    def test_pod_rejected_with_networks(self, caddy, app_network):
        """Test that networked containers cannot join a pod."""
        caddy.add_to_network(app_network)

        with pytest.raises(ContainerNetworkConflict) as exc_info:
            caddy._set_pod_ref(PodRef(id="web"))

        assert isinstance(exc_info.value, AttachmentConflictError)
        assert caddy.pod is None

    def test_second_pod_rejected(self, caddy):
        """Test that a container belongs to one pod."""
        caddy._set_pod_ref(PodRef(id="web"))

        with pytest.raises(ContainerAlreadyInPod):
            caddy._set_pod_ref(PodRef(id="other"))

        assert caddy.pod.id == "web"

    def test_dependencies_snapshot(self, caddy):
        """Test that the snapshot does not change with later attachments."""
        snapshot = caddy.get_dependencies()
        caddy.expose_port({"external": 80, "internal": 80})

        assert snapshot.ports == ()
        assert snapshot.pod is None
