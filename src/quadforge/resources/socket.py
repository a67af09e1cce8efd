"""Systemd socket resources."""

import logging
from typing import Any, Mapping, Union

from quadforge.models.socket import SocketConfig
from quadforge.resources.base import Resource, ResourceKind, coerce_config
from quadforge.utils.templates import render_unit


logger = logging.getLogger(__name__)


SOCKET_TEMPLATE = """\
[Socket]
{% for port in ports %}
ListenStream=[::]{{ port }}
{% endfor %}
BindIPv6Only=both
Service={{ activate_service }}.service

[Install]
WantedBy=socket.target
"""


class Socket(Resource):
    """A systemd socket that activates a service on connection."""

    kind = ResourceKind.SOCKET

    def config(self) -> SocketConfig:
        return self._config

    def generate_file_template(self) -> str:
        return render_unit(
            SOCKET_TEMPLATE,
            ports=self._config.ports,
            activate_service=self._config.activate_service,
        )


def create_socket(config: Union[SocketConfig, Mapping[str, Any]]) -> Socket:
    """Create a socket resource."""
    config = coerce_config(SocketConfig, config)
    logger.debug(f"Created socket {config.id} for {config.activate_service}.service")
    return Socket(config)
