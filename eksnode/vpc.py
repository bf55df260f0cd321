"""Subnet layout of a cluster VPC and clean-up of dangling interfaces."""

from __future__ import annotations

import enum
import ipaddress
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from eksnode.ipnet import IPNet, parse_cidr

log = logging.getLogger(__name__)

_MIN_PREFIX = 16
_MAX_PREFIX = 24


class SubnetTopology(enum.Enum):
    PRIVATE = "Private"
    PUBLIC = "Public"


@dataclass(frozen=True)
class ZoneSubnets:
    """The public and private subnet of one availability zone."""

    zone: str
    public: IPNet
    private: IPNet


def _network(cidr: Union[IPNet, str]) -> ipaddress.IPv4Network | ipaddress.IPv6Network:
    net = parse_cidr(cidr) if isinstance(cidr, str) else cidr
    if net.is_empty:
        raise ValueError("empty CIDR")
    return net.network


def split_into_8(cidr: Union[IPNet, str]) -> list[IPNet]:
    """Split an IPv4 network into eight equal consecutive subnets."""
    network = _network(cidr)
    if not isinstance(network, ipaddress.IPv4Network):
        raise ValueError(f"Unexpectedly got non-IPv4 address: {network}")
    if network.prefixlen + 3 > 32:
        raise ValueError(f"network {network} is too small to split into 8 subnets")
    return [IPNet(ipaddress.ip_interface(str(sub))) for sub in network.subnets(prefixlen_diff=3)]


def set_subnets(cidr: Union[IPNet, str], zones: Iterable[str]) -> list[ZoneSubnets]:
    """Assign a public and a private subnet of ``cidr`` to each zone.

    Public subnets take the first slots of the split, private ones follow.
    """
    zones = list(zones)
    prefix = _network(cidr).prefixlen
    if prefix < _MIN_PREFIX or prefix > _MAX_PREFIX:
        raise ValueError("VPC CIDR prefix must be betwee /16 and /24")
    zone_cidrs = split_into_8(cidr)
    log.debug("VPC CIDR (%s) was divided into 8 subnets %s", cidr, [str(c) for c in zone_cidrs])

    total = len(zones)
    if 2 * total > len(zone_cidrs):
        raise ValueError(
            f"insufficient number of subnets (have {len(zone_cidrs)}, but need {2 * total}) "
            f"for {total} availability zones"
        )

    result = []
    for zone, public, private in zip(zones, zone_cidrs, zone_cidrs[total:]):
        log.info("subnets for %s - public:%s private:%s", zone, public, private)
        result.append(ZoneSubnets(zone=zone, public=public, private=private))
    return result


def security_group_name_pattern(cluster_name: str) -> str:
    """Return the regular expression matching the cluster's own security group names."""
    return f"^eksctl-{cluster_name}-(cluster|nodegroup)-.+$"


def find_dangling_interfaces(interfaces: Iterable[Mapping[str, Any]], cluster_name: str) -> list[str]:
    """Return IDs of network interfaces whose first security group belongs to the cluster.

    Each interface is a mapping with ``NetworkInterfaceId`` and ``Groups``, a
    list of mappings with ``GroupName`` and ``GroupId``.
    """
    try:
        pattern = re.compile(security_group_name_pattern(cluster_name))
    except re.error as exc:
        raise ValueError(f"unable to list dangling network interfaces: {exc}") from exc

    found = []
    for eni in interfaces:
        eni_id = eni["NetworkInterfaceId"]
        groups = eni.get("Groups") or []
        if not groups:
            continue
        group = groups[0]
        name = group.get("GroupName", "")
        if pattern.search(name):
            log.debug("found %r, which belongs to our security group %r (%s)", eni_id, name, group.get("GroupId"))
            found.append(eni_id)
        else:
            log.debug(
                "found %r, but it belongs to security group %r (%s), which does not appear to be ours",
                eni_id, name, group.get("GroupId"),
            )
    return found