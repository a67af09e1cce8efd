"""Podman network resources."""

import logging
from typing import Any, Mapping, Union

from quadforge.errors import NetworkGatewayOutOfRange
from quadforge.models.network import NetworkConfig
from quadforge.resources.base import Resource, ResourceKind, coerce_config
from quadforge.utils.templates import render_unit


logger = logging.getLogger(__name__)


NETWORK_TEMPLATE = """\
[Network]
NetworkName={{ id }}
Driver=bridge
Subnet={{ subnet }}
Gateway={{ gateway }}

[Install]
WantedBy=default.target
"""


class Network(Resource):
    """A podman bridge network, shared by the containers and pods that join it."""

    kind = ResourceKind.NETWORK

    def config(self) -> NetworkConfig:
        return self._config

    def generate_file_template(self) -> str:
        return render_unit(
            NETWORK_TEMPLATE,
            id=self.id,
            subnet=self._config.subnet,
            gateway=self._config.gateway,
        )


def create_network(config: Union[NetworkConfig, Mapping[str, Any]], strict: bool = False) -> Network:
    """Create a network resource.

    With ``strict`` the gateway must fall inside the subnet; otherwise that
    check is left to podman.

    Example::

        app = create_network({"id": "app", "subnet": "10.89.0.0/24", "gateway": "10.89.0.1"})
    """
    config = coerce_config(NetworkConfig, config)
    if strict and not config.gateway_in_subnet():
        raise NetworkGatewayOutOfRange(config.id, config.gateway, config.subnet)
    logger.debug(f"Created network {config.id} ({config.subnet})")
    return Network(config)
