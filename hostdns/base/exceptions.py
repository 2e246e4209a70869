"""
hostdns exception hierarchy.

Every failure mode has a class that inherits from :class:`HostDNSError`.
The ``fatal`` attribute tells the CLI dispatcher whether the process must
stop with a non-zero exit code or merely report the problem.
"""


# ── Base ──────────────────────────────────────────────────────────────
class HostDNSError(Exception):
    """Root exception for all hostdns errors."""

    fatal = True


# ── Configuration ─────────────────────────────────────────────────────
class ConfigurationError(HostDNSError):
    """Invalid or missing command-line / config values."""


# ── DNS ───────────────────────────────────────────────────────────────
class DNSError(HostDNSError):
    """Base exception for DNS provider operations."""


class ZoneNotFoundError(DNSError):
    """No hosted zone matches the requested name or id."""


class ZoneResolutionError(DNSError):
    """Zone lookup kept failing until the backoff policy gave up."""


class RecordPublishError(DNSError):
    """The record upsert was rejected or could not be sent."""

    fatal = False


# ── Instance metadata ─────────────────────────────────────────────────
class MetadataError(HostDNSError):
    """Instance metadata service unreachable or returned no value."""
