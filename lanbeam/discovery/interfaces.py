"""
Network interface catalog.

Takes a fresh snapshot of the host's interfaces on every call and keeps
only those that have at least one IPv4 or IPv6 address assigned.
"""

import logging
import socket
from ipaddress import ip_interface
from typing import Callable, Iterable

import psutil

from lanbeam.discovery.models import InterfaceAddress, InterfaceRecord

logger = logging.getLogger(__name__)

# Returns every interface of the host, with or without addresses.
NetworkInterfaceProvider = Callable[[], Iterable[InterfaceRecord]]


def _to_interface_address(address: str, netmask: str | None) -> InterfaceAddress:
    # Link-local IPv6 addresses come back as "fe80::1%eth0"
    host = address.split("%", 1)[0]
    if not netmask:
        return ip_interface(host)
    if ":" in netmask:
        # IPv6 netmasks are given in address form, e.g. "ffff:ffff:ffff:ffff::"
        prefix = bin(int.from_bytes(socket.inet_pton(socket.AF_INET6, netmask), "big")).count("1")
        return ip_interface(f"{host}/{prefix}")
    return ip_interface(f"{host}/{netmask}")


def psutil_interfaces() -> list[InterfaceRecord]:
    """Query the operating system for its network interfaces."""
    stats = psutil.net_if_stats()
    records = []
    for name, snics in psutil.net_if_addrs().items():
        addresses = []
        mac = None
        for snic in snics:
            if snic.family in (socket.AF_INET, socket.AF_INET6):
                try:
                    addresses.append(_to_interface_address(snic.address, snic.netmask))
                except (ValueError, OSError) as e:
                    logger.debug(f"Skipping unparsable address {snic.address!r} on {name}: {e}")
            elif snic.family == psutil.AF_LINK:
                mac = snic.address

        stat = stats.get(name)
        records.append(
            InterfaceRecord(
                name=name,
                addresses=tuple(addresses),
                mac=mac,
                is_up=stat.isup if stat else False,
                mtu=stat.mtu if stat else 0,
            )
        )
    return records


class InterfaceCatalog:
    """Looks up the network interfaces that can be served on."""

    def __init__(self, provider: NetworkInterfaceProvider = psutil_interfaces) -> None:
        self._provider = provider

    def list(self) -> dict[str, InterfaceRecord]:
        """Return a snapshot of interfaces with at least one address, by name."""
        catalog = {
            record.name: record
            for record in self._provider()
            if record.addresses
        }
        logger.debug(f"Found {len(catalog)} network interfaces with addresses")
        return catalog
