"""hostdns CLI — register this host in a Route 53 hosted zone.

Usage examples::

    hostdns --hostname svc1 --zonename internal.example.com.
    hostdns -hostname svc1 -zoneId Z123 -cname

Single-dash long flags are accepted so existing boot scripts keep working.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from hostdns.base.config import validate_config
from hostdns.base.exceptions import HostDNSError
from hostdns.base.logger import hd_logger


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``hostdns`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="hostdns",
        description="Register this host's private IP or public hostname in a Route 53 zone",
    )
    parser.add_argument(
        "--hostname", "-hostname",
        default="",
        help="Which name to use for the new entry",
    )
    parser.add_argument(
        "--zonename", "-zonename",
        default="",
        help="Which zone to use for registering records",
    )
    parser.add_argument(
        "--zoneId", "--zone-id", "-zoneId",
        dest="zone_id",
        default="",
        help="Hosted zone id; skips the zone name lookup",
    )
    parser.add_argument(
        "--cname", "-cname",
        action="store_true",
        help="Create a CNAME to the public hostname instead of an A record to the private IP",
    )
    parser.add_argument(
        "--debug", "-debug",
        action="store_true",
        help="Log DNS API requests and responses",
    )
    return parser


def _run(config: Any) -> None:
    # Lazy-import so argument errors never load boto3 clients
    from hostdns.factory import service_factory
    from hostdns.registrar import Registrar

    dns = service_factory("dns", config)
    metadata = service_factory("metadata", config)
    Registrar(config, dns, metadata).run()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point and the only place that decides the exit code.

    Fatal errors (bad flags, zone lookup exhausted, metadata failure,
    client construction failure) exit 1. A failed record upsert is
    reported as a warning and still exits 0.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).

    Returns:
        Process exit code.
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    if ns.debug:
        hd_logger.enable_debug()

    try:
        config = validate_config({
            "hostname": ns.hostname,
            "zone_name": ns.zonename or None,
            "zone_id": ns.zone_id or None,
            "cname": ns.cname,
            "debug": ns.debug,
        })
    except HostDNSError as e:
        hd_logger.error(f"Invalid arguments: {e}", operation="configure")
        return 1

    try:
        _run(config)
    except HostDNSError as e:
        if e.fatal:
            hd_logger.error(str(e), operation=type(e).__name__)
            return 1
        hd_logger.error(str(e), operation="publish")
        kind = "CName" if config.cname else "A"
        hd_logger.warning(f"Error creating host {kind} record", operation="publish")
    return 0


if __name__ == "__main__":
    sys.exit(main())
