"""Pydantic models for endpoint discovery."""

import socket
from ipaddress import IPv4Interface, IPv6Interface
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

# An address assigned to an interface, together with its network prefix.
InterfaceAddress = IPv4Interface | IPv6Interface


class InterfaceRecord(BaseModel):
    """A network interface of this host and the addresses assigned to it."""
    model_config = ConfigDict(frozen=True)

    name: str
    addresses: tuple[InterfaceAddress, ...]
    mac: str | None = None
    is_up: bool = False
    mtu: int = 0


class Choice(BaseModel, Generic[T]):
    """The outcome of a numbered selection."""
    model_config = ConfigDict(frozen=True)

    index: int  # 0-based position in the candidates offered
    value: T


class DisplayAddress(BaseModel):
    """An interface address and the text shown to the user for it."""
    model_config = ConfigDict(frozen=True)

    address: InterfaceAddress
    text: str

    @property
    def family(self) -> socket.AddressFamily:
        if self.address.version == 4:
            return socket.AF_INET
        return socket.AF_INET6


class ResolvedEndpoint(BaseModel):
    """Where the server binds and the URL peers are given to reach it."""
    model_config = ConfigDict(frozen=True)

    url: str
    socket_address: tuple[str, int] | tuple[str, int, int, int]
    family: socket.AddressFamily

    @property
    def host(self) -> str:
        return self.socket_address[0]

    @property
    def port(self) -> int:
        return self.socket_address[1]
