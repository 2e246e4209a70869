"""DNS service blueprint."""

from abc import ABC, abstractmethod


class DNSBlueprint(ABC):
    """Abstract interface for the zone lookup and record upsert a run needs.

    Maps to AWS Route 53.
    """

    @abstractmethod
    def find_zone_id(self, zone_name: str) -> str:
        """Look up a hosted zone by name and return its identifier.

        Args:
            zone_name: Fully qualified domain (e.g. ``example.com.``).

        Returns:
            Provider zone identifier (e.g. ``/hostedzone/Z123``).

        Raises:
            ZoneNotFoundError: If no zone carries that name.
            DNSError: On any other provider failure.
        """

    @abstractmethod
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
        """Create or replace a single weighted record.

        Args:
            zone_id: Zone identifier.
            record_name: FQDN of the record (e.g. ``www.example.com.``).
            record_type: ``A`` or ``CNAME``.
            value: Record value.
            ttl: Time-to-live in seconds.
            weight: Weighted-routing weight.
            set_identifier: Distinguishes weighted records sharing a name,
                defaults to *record_name*.
            comment: Change description.

        Raises:
            RecordPublishError: If the provider rejected the change.
        """
