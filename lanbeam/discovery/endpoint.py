"""
Endpoint resolution.

Picks the interface and address to serve on, then builds the socket
address the HTTP server binds and the URL handed out to peers.
"""

import logging

from lanbeam.config import ADDRESS_PROMPT, INTERFACE_PROMPT
from lanbeam.discovery.addresses import AddressResolver
from lanbeam.discovery.interfaces import InterfaceCatalog
from lanbeam.discovery.models import DisplayAddress, InterfaceAddress, InterfaceRecord, ResolvedEndpoint
from lanbeam.errors import InterfaceNotFoundError
from lanbeam.prompt import Echo, SelectionPrompt

logger = logging.getLogger(__name__)


def socket_address(address: InterfaceAddress, port: int) -> tuple[str, int] | tuple[str, int, int, int]:
    """Build a bindable socket address; IPv6 gets zero flow info and scope id."""
    if address.version == 4:
        return (str(address.ip), port)
    return (str(address.ip), port, 0, 0)


def share_url(address: DisplayAddress, port: int, domain: str | None = None) -> str:
    """Build the URL peers use to reach the server."""
    if domain:
        return f"http://{domain}:{port}"
    if address.address.version == 4:
        return f"http://{address.text}:{port}"
    # IPv6 literals must be bracketed in URLs
    return f"http://[{address.text}]:{port}"


class EndpointResolver:
    """Works out where to serve, asking the user whenever it is ambiguous."""

    def __init__(
        self,
        catalog: InterfaceCatalog,
        prompt: SelectionPrompt,
        verbose: bool = False,
        echo: Echo = print,
    ) -> None:
        self._catalog = catalog
        self._prompt = prompt
        self._addresses = AddressResolver(prompt)
        self._verbose = verbose
        self._echo = echo

    def choose_interface(self, name: str | None = None) -> InterfaceRecord:
        """Return the interface called `name`, or ask for one if not given."""
        interfaces = self._catalog.list()
        if name is not None:
            try:
                return interfaces[name]
            except KeyError:
                raise InterfaceNotFoundError(name) from None

        names = sorted(interfaces)
        choice = self._prompt.choose(INTERFACE_PROMPT, names)
        return interfaces[choice.value]

    def resolve(
        self,
        interface_name: str | None,
        port: int,
        domain: str | None = None,
    ) -> ResolvedEndpoint:
        """Resolve the socket address to bind and the URL to share."""
        interface = self.choose_interface(interface_name)
        logger.info(f"Using network interface {interface.name}")
        if self._verbose:
            self._echo(interface.model_dump_json(indent=2))

        choice = self._addresses.resolve(ADDRESS_PROMPT, interface)
        chosen = choice.value
        endpoint = ResolvedEndpoint(
            url=share_url(chosen, port, domain),
            socket_address=socket_address(chosen.address, port),
            family=chosen.family,
        )
        logger.info(f"Resolved endpoint {endpoint.url} -> {endpoint.socket_address}")
        return endpoint
