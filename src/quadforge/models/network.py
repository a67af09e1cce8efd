"""Network specification models."""

import ipaddress

from pydantic import Field, field_validator

from quadforge.models.base import ResourceConfig


class NetworkConfig(ResourceConfig):
    """Configuration for a podman .network file."""
    subnet: str = Field(..., description="Subnet in CIDR notation (e.g. '10.89.0.0/24')")
    gateway: str = Field(..., description="Gateway IP address (e.g. '10.89.0.1')")

    @field_validator("subnet")
    @classmethod
    def validate_subnet(cls, v):
        """Validate subnet notation."""
        try:
            ipaddress.ip_network(v, strict=False)
        except ValueError as e:
            raise ValueError(f"Invalid subnet: {v}") from e
        return v

    @field_validator("gateway")
    @classmethod
    def validate_gateway(cls, v):
        """Validate gateway address."""
        try:
            ipaddress.ip_address(v)
        except ValueError as e:
            raise ValueError(f"Invalid gateway address: {v}") from e
        return v

    def gateway_in_subnet(self) -> bool:
        """Check whether the gateway falls inside the subnet."""
        network = ipaddress.ip_network(self.subnet, strict=False)
        return ipaddress.ip_address(self.gateway) in network
