"""Install locations used by systemd and Podman."""

# Relative to the user's home directory
PODMAN_PATHS = {
    "quadlet": ".config/containers/systemd",
    "systemd": ".config/systemd/user",
}

DISTRO_HOME_DIR = {
    "ubuntu": "/home",
    "debian": "/home",
    "centos": "/home",
    "fedora-coreos": "/var/home",
}
