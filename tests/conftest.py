"""Shared fixtures for lanbeam tests."""

from ipaddress import ip_interface

import pytest

from lanbeam.discovery.interfaces import InterfaceCatalog
from lanbeam.discovery.models import InterfaceRecord
from lanbeam.prompt import SelectionPrompt


def make_record(name: str, *addresses: str) -> InterfaceRecord:
    return InterfaceRecord(
        name=name,
        addresses=tuple(ip_interface(a) for a in addresses),
        is_up=True,
    )


class CannedInput:
    """Line reader that replays fixed answers and counts how many were read."""

    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        self.reads += 1
        return self._lines.pop(0)


@pytest.fixture
def interfaces() -> list[InterfaceRecord]:
    """A fixed host: loopback, ethernet, dual-stack wifi and one bare interface."""
    return [
        make_record("wlan0", "192.168.1.5/24", "fe80::abcd:1:2:3/64"),
        make_record("lo", "127.0.0.1/8", "::1/128"),
        make_record("eth0", "10.0.0.2/8"),
        make_record("docker0"),
    ]


@pytest.fixture
def catalog(interfaces) -> InterfaceCatalog:
    return InterfaceCatalog(lambda: interfaces)


@pytest.fixture
def echoed() -> list[str]:
    return []


@pytest.fixture
def prompt_with(echoed):
    """Build a SelectionPrompt that answers with the given lines."""
    def factory(*lines: str) -> SelectionPrompt:
        return SelectionPrompt(read_line=CannedInput(*lines), echo=echoed.append)
    return factory
