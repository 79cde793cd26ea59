import ipaddress
from abc import ABC, abstractmethod
from typing import Optional, Union
from urllib.parse import urlparse

from .config import PRIVATE_NETWORKS, settings
from .errors import ValidationError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AddressPolicy(ABC):
    """Decides whether an IP address is unreachable from the public internet"""

    @abstractmethod
    def is_private(self, ip: IPAddress) -> bool:
        pass


def _unwrap(ip: IPAddress) -> IPAddress:
    # ::ffff:a.b.c.d reaches the same host as a.b.c.d
    mapped = getattr(ip, "ipv4_mapped", None)
    return mapped if mapped is not None else ip


class StdlibAddressPolicy(AddressPolicy):
    """Relies on the classification flags built into the ipaddress module"""

    def is_private(self, ip: IPAddress) -> bool:
        ip = _unwrap(ip)
        return ip.is_private or ip.is_loopback or ip.is_link_local


class RangeTableAddressPolicy(AddressPolicy):
    """Checks addresses against the fixed PRIVATE_NETWORKS table"""

    def __init__(self, networks=PRIVATE_NETWORKS):
        self.networks = networks

    def is_private(self, ip: IPAddress) -> bool:
        ip = _unwrap(ip)
        if ip.is_loopback or ip.is_link_local:
            return True
        return any(ip.version == net.version and ip in net for net in self.networks)


ADDRESS_POLICIES = {
    "stdlib": StdlibAddressPolicy,
    "table": RangeTableAddressPolicy,
}


def get_address_policy(name: Optional[str] = None) -> AddressPolicy:
    name = name or settings.ADDRESS_POLICY
    try:
        return ADDRESS_POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown address policy: {name}") from None


def validate_callback_url(url: str, policy: Optional[AddressPolicy] = None) -> str:
    """
    Ensure a callback URL can be reached by the remote service.

    Host names are not resolved; only literal addresses and "localhost" are rejected.
    """
    policy = policy or get_address_policy()

    try:
        uri = urlparse(url)
        host = uri.hostname
    except ValueError:
        raise ValidationError("invalid URL format") from None

    if not uri.scheme or not uri.netloc or not host:
        raise ValidationError("invalid URL format")

    if host.rstrip(".").lower() == "localhost":
        raise ValidationError("invalid URL, the host does not appear to be a remote host")

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        ip = None
    if ip is not None and policy.is_private(ip):
        raise ValidationError("invalid URL, the host does not appear to be a remote host")

    if uri.scheme.lower() not in ("http", "https"):
        raise ValidationError("invalid URL, only http and https protocols are allowed")

    return url
