"""Instance metadata blueprint."""

from abc import ABC, abstractmethod
from typing import Literal

metadata_keys = Literal["local-ipv4", "public-hostname"]

SUPPORTED_KEYS: tuple[str, ...] = ("local-ipv4", "public-hostname")


class MetadataBlueprint(ABC):
    """Abstract interface for reading the host's own attributes."""

    @abstractmethod
    def get_metadata(self, key: metadata_keys) -> str:
        """Return the value stored under *key*.

        Raises:
            MetadataError: If the service is unreachable, rejects the
                request, or returns an empty value.
        """
