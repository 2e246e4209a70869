"""hostdns — register the running host in a Route 53 hosted zone.

Resolves a zone, reads the host's private IPv4 (or public hostname) from
instance metadata, and upserts one weighted record pointing at it::

    from hostdns import Registrar, service_factory, validate_config

    config = validate_config({"hostname": "svc1", "zone_name": "internal.example.com."})
    Registrar(config, service_factory("dns", config), service_factory("metadata", config)).run()
"""

from .base import (
    DNSBlueprint,
    MetadataBlueprint,
)
from .base.config import validate_config
from .factory import service_factory
from .registrar import HostRecordRequest, Registrar

__all__ = [
    "DNSBlueprint",
    "MetadataBlueprint",
    "HostRecordRequest",
    "Registrar",
    "service_factory",
    "validate_config",
]
