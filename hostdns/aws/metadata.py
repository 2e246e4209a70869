"""EC2 instance metadata (IMDS) implementation of the metadata blueprint."""

from __future__ import annotations

import logging

import requests

from hostdns.base.exceptions import MetadataError
from hostdns.base.metadata import SUPPORTED_KEYS, MetadataBlueprint, metadata_keys

logger = logging.getLogger("hostdns")

TOKEN_TTL_HEADER = "X-aws-ec2-metadata-token-ttl-seconds"
TOKEN_HEADER = "X-aws-ec2-metadata-token"
TOKEN_TTL_SECONDS = 21600
# Token PUT timeout; past it the GET goes out without a token (IMDSv1)
TOKEN_TIMEOUT_SECONDS = 1.0


class Metadata(MetadataBlueprint):
    """Reads ``/meta-data/<key>`` from the EC2 instance metadata service.

    An IMDSv2 session token is requested first; if the token endpoint is
    unavailable the request is made without one (IMDSv1).

    Attributes:
        session: :class:`requests.Session` used for every call.
    """

    def __init__(
        self,
        base_url: str = "http://169.254.169.254/latest",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            base_url: Metadata service root, without trailing slash.
            timeout: Timeout for the metadata GET in seconds; ``None`` waits
                forever. The token PUT always uses ``TOKEN_TIMEOUT_SECONDS``.
            session: Optional pre-built HTTP session.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _token(self) -> str | None:
        try:
            resp = self.session.put(
                f"{self.base_url}/api/token",
                headers={TOKEN_TTL_HEADER: str(TOKEN_TTL_SECONDS)},
                timeout=TOKEN_TIMEOUT_SECONDS,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.debug("IMDSv2 token unavailable, falling back to IMDSv1: %s", e)
            return None
        return resp.text.strip() or None

    def get_metadata(self, key: metadata_keys) -> str:
        """Fetch one metadata value with a single GET.

        Args:
            key: ``local-ipv4`` or ``public-hostname``.

        Returns:
            The value with surrounding whitespace removed.

        Raises:
            MetadataError: Unknown key, transport failure, non-2xx status
                or empty body.
        """
        if key not in SUPPORTED_KEYS:
            raise MetadataError(f"Unsupported metadata key '{key}'")

        headers = {}
        token = self._token()
        if token:
            headers[TOKEN_HEADER] = token

        url = f"{self.base_url}/meta-data/{key}"
        try:
            resp = self.session.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise MetadataError(f"Failed to fetch metadata '{key}': {e}") from e

        value = resp.text.strip()
        if not value:
            raise MetadataError(f"Metadata '{key}' is empty")
        return value
