"""AWS Route 53 implementation of the DNS blueprint."""

from __future__ import annotations

from typing import NoReturn

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hostdns.base.dns import DNSBlueprint
from hostdns.base.exceptions import (
    DNSError,
    RecordPublishError,
    ZoneNotFoundError,
)
from hostdns.base.config import AWSConfig

_ERROR_MAP: dict[str, type[DNSError]] = {
    "NoSuchHostedZone": ZoneNotFoundError,
    "InvalidDomainName": ZoneNotFoundError,
}


def _handle(e: ClientError | BotoCoreError, msg: str) -> NoReturn:
    exc = None
    if isinstance(e, ClientError):
        exc = _ERROR_MAP.get(e.response["Error"]["Code"])
    raise (exc or DNSError)(f"{msg}: {e}") from e


def _same_name(a: str, b: str) -> bool:
    return a.rstrip(".").lower() == b.rstrip(".").lower()


class DNS(DNSBlueprint):
    """AWS Route 53 DNS service.

    Attributes:
        client: boto3 Route 53 client.
    """

    def __init__(self, config: AWSConfig) -> None:
        """Initialize the Route 53 client.

        Args:
            config: AWS configuration object containing credentials and region.

        Raises:
            DNSError: If boto3 cannot build a client (bad profile, broken
                local AWS config, ...).
        """
        try:
            self.client = boto3.client(
                "route53",
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
                region_name=config.region_name,
            )
        except BotoCoreError as e:
            _handle(e, "Failed to create Route 53 session")

    def find_zone_id(self, zone_name: str) -> str:
        """Find a Route 53 hosted zone by name.

        ``ListHostedZonesByName`` returns zones in lexicographic order
        *starting at* ``zone_name``, so the first entry is only a match when
        its name is the one asked for.

        Returns:
            Hosted zone ID in path form (``/hostedzone/Z123``).

        Raises:
            ZoneNotFoundError: If no zone has that name.
            DNSError: On Route 53 API or transport failure.
        """
        try:
            resp = self.client.list_hosted_zones_by_name(DNSName=zone_name)
        except (ClientError, BotoCoreError) as e:
            _handle(e, f"Failed to look up zone '{zone_name}'")

        for zone in resp.get("HostedZones", []):
            if _same_name(zone["Name"], zone_name):
                return zone["Id"]  # type: ignore[no-any-return]
        raise ZoneNotFoundError(f"No hosted zone named '{zone_name}'")

    def upsert_record(
        self,
        zone_id: str,
        record_name: str,
        record_type: str,
        value: str,
        ttl: int = 0,
        weight: int = 1,
        set_identifier: str | None = None,
        comment: str | None = None,
    ) -> None:
        """Apply a single-change ``UPSERT`` batch for a weighted record.

        Args:
            zone_id: Hosted zone ID.
            record_name: FQDN of the record.
            record_type: DNS record type (A, CNAME).
            value: Record value.
            ttl: Time-to-live in seconds.
            weight: Weighted-routing weight.
            set_identifier: Route 53 ``SetIdentifier``, required for
                weighted records; defaults to *record_name*.
            comment: Change-batch comment.

        Raises:
            RecordPublishError: On Route 53 API or transport failure.
        """
        change_batch: dict = {
            "Changes": [
                {
                    "Action": "UPSERT",
                    "ResourceRecordSet": {
                        "Name": record_name,
                        "Type": record_type,
                        "ResourceRecords": [{"Value": value}],
                        "SetIdentifier": set_identifier or record_name,
                        "TTL": ttl,
                        "Weight": weight,
                    },
                }
            ]
        }
        if comment:
            change_batch["Comment"] = comment
        try:
            self.client.change_resource_record_sets(
                HostedZoneId=zone_id,
                ChangeBatch=change_batch,
            )
        except (ClientError, BotoCoreError) as e:
            raise RecordPublishError(
                f"Failed to upsert record '{record_name}' in zone '{zone_id}': {e}"
            ) from e
