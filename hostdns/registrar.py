"""Host record registration.

Runs the three phases of a registration in order: resolve the hosted zone,
read the host's address (or public hostname) from instance metadata, then
upsert one weighted record pointing at it. Errors are raised, never turned
into process exits here; :mod:`hostdns.cli` decides what is fatal.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from hostdns.base.config import RegistrationConfig
from hostdns.base.dns import DNSBlueprint
from hostdns.base.exceptions import DNSError, ZoneNotFoundError
from hostdns.base.logger import hd_logger
from hostdns.base.metadata import MetadataBlueprint
from hostdns.base.retry import retry_linear

ZONE_PATH_PREFIX = "/hostedzone/"

CHANGE_COMMENTS = {
    "A": "Host A Record Created",
    "CNAME": "Host CName Record Created",
}


@dataclass(frozen=True)
class HostRecordRequest:
    """A single record to publish, built once per run."""

    zone_id: str
    record_name: str
    record_type: str
    value: str
    ttl: int = 0
    weight: int = 1
    set_identifier: str | None = None

    @property
    def comment(self) -> str:
        return CHANGE_COMMENTS.get(self.record_type, f"Host {self.record_type} Record Created")


def zone_path(zone_id: str) -> str:
    """Return *zone_id* in Route 53's ``/hostedzone/<id>`` form."""
    zone_id = zone_id.strip().lstrip("/")
    if zone_id.startswith(ZONE_PATH_PREFIX.lstrip("/")):
        return "/" + zone_id
    return ZONE_PATH_PREFIX + zone_id


def build_record_name(host_name: str, zone_name: str | None) -> str:
    """Join the full host name with the zone name.

    ``svc1`` in ``internal.example.com.`` gives ``svc1.internal.example.com.``.
    Without a zone name the host name is already the record name.
    """
    host_name = host_name.rstrip(".")
    if not zone_name:
        return host_name
    return f"{host_name}.{zone_name.lstrip('.')}"


class Registrar:
    """Publishes this host under a hosted zone.

    Attributes:
        config: Validated registration settings.
        dns: DNS provider used for zone lookup and the upsert.
        metadata: Instance metadata reader.
    """

    def __init__(
        self,
        config: RegistrationConfig,
        dns: DNSBlueprint,
        metadata: MetadataBlueprint,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.config = config
        self.dns = dns
        self.metadata = metadata
        self._sleep = sleep or time.sleep

    def resolve_zone(self) -> str:
        """Return the hosted zone id, looking it up by name if needed.

        An explicit zone id short-circuits with no network call. A name
        lookup is retried with linear backoff on any :class:`DNSError`.

        Raises:
            ZoneResolutionError: When the lookup never succeeded.
        """
        if self.config.zone_id:
            zone_id = zone_path(self.config.zone_id)
            hd_logger.debug("Using explicit zone id", zone_id=zone_id, operation="resolve_zone")
            return zone_id

        zone_name = self.config.zone_name or ""
        zone_id = retry_linear(
            lambda: self.dns.find_zone_id(zone_name),
            step=self.config.retry_step,
            max_steps=self.config.max_retry_steps,
            retryable_exceptions=(DNSError,),
            sleep=self._sleep,
            description=f"zone lookup for '{zone_name}'",
        )
        if not zone_id:
            raise ZoneNotFoundError(f"Empty zone id returned for '{zone_name}'")
        zone_id = zone_path(zone_id)
        hd_logger.info(f"Resolved zone {zone_name} to {zone_id}", zone_id=zone_id, operation="resolve_zone")
        return zone_id

    def fetch_target(self) -> str:
        """Read the private IPv4 (A record) or public hostname (CNAME)."""
        value = self.metadata.get_metadata(self.config.metadata_key)  # type: ignore[arg-type]
        hd_logger.debug(f"Metadata {self.config.metadata_key} = {value}", operation="fetch_metadata")
        return value

    def build_request(self, zone_id: str, value: str) -> HostRecordRequest:
        return HostRecordRequest(
            zone_id=zone_id,
            record_name=build_record_name(self.config.hostname, self.config.zone_name),
            record_type=self.config.record_type,
            value=value,
            ttl=self.config.ttl,
            weight=self.config.weight,
            set_identifier=self.config.hostname,
        )

    def publish(self, request: HostRecordRequest) -> None:
        """Upsert *request*; raises :class:`RecordPublishError` on failure."""
        if not request.zone_id:
            raise ZoneNotFoundError("Refusing to publish without a zone id")
        self.dns.upsert_record(
            request.zone_id,
            request.record_name,
            request.record_type,
            request.value,
            ttl=request.ttl,
            weight=request.weight,
            set_identifier=request.set_identifier,
            comment=request.comment,
        )
        hd_logger.info(
            f"Record {request.record_name} created, resolves to {request.value}",
            zone_id=request.zone_id,
            record_name=request.record_name,
            operation="publish",
        )

    def run(self) -> HostRecordRequest:
        """Resolve, fetch, publish. Returns the request that was published."""
        zone_id = self.resolve_zone()
        value = self.fetch_target()
        request = self.build_request(zone_id, value)
        self.publish(request)
        return request
