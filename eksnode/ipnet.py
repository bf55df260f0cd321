"""CIDR-serialisable IP network values."""

from __future__ import annotations

import ipaddress
import json
from dataclasses import dataclass
from typing import Optional, Union

Interface = Union[ipaddress.IPv4Interface, ipaddress.IPv6Interface]


def _parse_interface(text: str) -> Interface:
    if "/" not in text:
        raise ValueError(f"invalid CIDR address: {text}")
    return ipaddress.ip_interface(text)


@dataclass
class IPNet:
    """An IP address with its prefix, serialised as CIDR notation.

    The address is kept as given (host bits are not cleared). An empty
    value serialises to JSON ``null``.
    """

    interface: Optional[Interface] = None

    @property
    def is_empty(self) -> bool:
        return self.interface is None

    @property
    def ip(self):
        return None if self.interface is None else self.interface.ip

    @property
    def prefix_length(self) -> Optional[int]:
        return None if self.interface is None else self.interface.network.prefixlen

    @property
    def network(self):
        return None if self.interface is None else self.interface.network

    def __str__(self) -> str:
        return "" if self.interface is None else str(self.interface)

    def deep_copy(self) -> IPNet:
        """Return an independent copy."""
        return IPNet(self.interface)

    def to_json(self) -> str:
        """Serialise to JSON: a CIDR string, or ``null`` when empty."""
        if self.interface is None:
            return "null"
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray]) -> IPNet:
        """Parse the JSON form produced by :meth:`to_json`."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode()
        if data.strip() == "null":
            return cls()
        try:
            cidr = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"failed to Unmarshal string: {exc}") from exc
        if not isinstance(cidr, str):
            raise ValueError(f"failed to Unmarshal string: got {type(cidr).__name__}")
        try:
            return cls(_parse_interface(cidr))
        except ValueError as exc:
            raise ValueError(f"failed to Parse cidr string to net.IPNet: {exc}") from exc


def parse_cidr(text: str) -> IPNet:
    """Parse a CIDR string into the network it denotes (host bits cleared)."""
    if "/" not in text:
        raise ValueError(f"invalid CIDR address: {text}")
    network = ipaddress.ip_network(text, strict=False)
    return IPNet(ipaddress.ip_interface(str(network)))