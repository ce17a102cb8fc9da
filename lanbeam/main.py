"""
lanbeam — command-line entry point.

Resolves the endpoint to serve on, prints the URL and its QR code, then
starts the HTTP server.
"""

import argparse
import logging
import sys
from pathlib import Path

from lanbeam.config import APP_DESCRIPTION, APP_NAME, DEFAULT_PORT, LOG_FORMAT, PORT_MAX, PORT_MIN
from lanbeam.discovery.endpoint import EndpointResolver
from lanbeam.discovery.interfaces import InterfaceCatalog
from lanbeam.errors import ResolutionError
from lanbeam.prompt import SelectionPrompt
from lanbeam.qr import print_qr
from lanbeam.server import serve

logger = logging.getLogger(__name__)


def existing_path(value: str) -> Path:
    path = Path(value)
    if not path.exists():
        raise argparse.ArgumentTypeError("File or path does not exist")
    return path


def port_number(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        port = -1
    if not PORT_MIN <= port <= PORT_MAX:
        raise argparse.ArgumentTypeError("Must be a integer between 0 and 65536")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument(
        "path",
        metavar="PATH",
        nargs="?",
        type=existing_path,
        help="Path to a file or directory to be transferred.",
    )
    parser.add_argument(
        "-r", "--receive",
        action="store_true",
        help="Receive data from a source instead of sending it",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Produce more verbose output. Multiple usage for more verbose output",
    )
    parser.add_argument(
        "-n", "--device",
        metavar="NETWORK_DEVICE",
        help="The network device over which the web server will run",
    )
    parser.add_argument(
        "-d", "--domain",
        metavar="DOMAIN",
        help="The domain, the web server should be served on",
    )
    parser.add_argument(
        "-p", "--port",
        metavar="PORT",
        type=port_number,
        default=DEFAULT_PORT,
        help="Port the web server listens on",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.path is None and not args.receive:
        parser.error("the following arguments are required: PATH (unless --receive is given)")
    return args


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.verbose >= 1:
        print(f"Arguments: {args}")

    if args.receive:
        logger.info("Receiving data from a peer")
    else:
        logger.info(f"Offering {args.path} to peers")

    resolver = EndpointResolver(
        InterfaceCatalog(),
        SelectionPrompt(),
        verbose=args.verbose >= 1,
    )
    try:
        endpoint = resolver.resolve(args.device, args.port, domain=args.domain)
    except ResolutionError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    print(f"Listening on {endpoint.url}")
    print_qr(endpoint.url)

    if not serve(endpoint):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
