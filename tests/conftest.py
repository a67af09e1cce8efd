"""Shared fixtures."""

import pytest


PROJECT_YAML = """\
distro: ubuntu
users:
  Alice:
    pods: [wordpress]
    sockets: [caddy]
  bob:
    containers: [caddy]

networks:
  - id: app
    subnet: 10.89.0.0/24
    gateway: 10.89.0.1
  - id: db
    subnet: 10.89.1.0/24
    gateway: 10.89.1.1

volumes:
  - id: uploads
    mount_path: /var/www/html/wp-content/uploads
    selinux_label: z
  - id: db-data
    mount_path: /var/lib/mysql
    selinux_label: Z
  - id: caddy-config
    mount_path: /etc/caddy
    host_path: /srv/caddy

sockets:
  - id: caddy
    activate_service: caddy
    ports: [80, 443]

containers:
  - id: caddy
    image: docker.io/caddy:latest
    networks: [app]
    ports:
      - external: 80
        internal: 80
    volumes: [caddy-config]
  - id: web
    image: docker.io/wordpress:latest
  - id: db
    image: docker.io/mariadb:latest
    volumes: [db-data]

pods:
  - id: wordpress
    description: Wordpress stack
    networks: [db]
    ports:
      - external: 8080
        internal: 80
    volumes: [uploads]
    containers: [web, db]
"""


@pytest.fixture
def project_file(tmp_path):
    """A project file with pods, containers, sockets and two users."""
    path = tmp_path / "project.yaml"
    path.write_text(PROJECT_YAML)
    return path
