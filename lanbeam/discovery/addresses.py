"""Choosing one of the addresses assigned to an interface."""

import logging
from typing import Sequence

from lanbeam.discovery.models import Choice, DisplayAddress, InterfaceAddress, InterfaceRecord
from lanbeam.prompt import SelectionPrompt

logger = logging.getLogger(__name__)


def address_text(address: InterfaceAddress) -> str:
    """
    Render an address for display.

    IPv4 is dotted decimal. IPv6 is always eight groups of unpadded
    lowercase hex, with no "::" compression: fe80:0:0:0:abcd:1:2:3.
    """
    if address.version == 4:
        return ".".join(str(octet) for octet in address.ip.packed)
    packed = address.ip.packed
    groups = (int.from_bytes(packed[i:i + 2], "big") for i in range(0, 16, 2))
    return ":".join(f"{group:x}" for group in groups)


def display_addresses(addresses: Sequence[InterfaceAddress]) -> list[DisplayAddress]:
    return [DisplayAddress(address=address, text=address_text(address)) for address in addresses]


class AddressResolver:
    """Lets the user pick which address of an interface to serve on."""

    def __init__(self, prompt: SelectionPrompt) -> None:
        self._prompt = prompt

    def resolve(self, message: str, interface: InterfaceRecord) -> Choice[DisplayAddress]:
        """
        Ask for one of `interface`'s addresses.

        The returned choice carries the address itself, not only its
        text, so its family and binary form reach socket creation intact.
        """
        candidates = display_addresses(interface.addresses)
        choice = self._prompt.choose(message, [c.text for c in candidates])
        chosen = candidates[choice.index]
        logger.info(f"Using address {chosen.text} on {interface.name}")
        return Choice(index=choice.index, value=chosen)
