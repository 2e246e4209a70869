"""Abstract service blueprints and core utilities.

The DNS and metadata services inherit from the blueprints defined here.
Import them to type-hint your own code or to plug in other providers.
"""

from .dns import DNSBlueprint
from .metadata import MetadataBlueprint
from .supported_services import existing_services


__all__ = [
    "DNSBlueprint",
    "MetadataBlueprint",
    "existing_services",
]
