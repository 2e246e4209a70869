"""Service factory.

Provides :func:`service_factory`, the single entry-point for creating the
DNS and metadata clients a registration run uses. ``@overload``
signatures give callers a typed instance.
"""

from typing import overload, Literal, Any

from hostdns.base import DNSBlueprint, MetadataBlueprint, existing_services
from hostdns.base.config import RegistrationConfig
from hostdns.aws.factory import SERVICE_REGISTRY


@overload
def service_factory(service_name: Literal["dns"], config: RegistrationConfig) -> DNSBlueprint: ...


@overload
def service_factory(
    service_name: Literal["metadata"], config: RegistrationConfig
) -> MetadataBlueprint: ...


def service_factory(service_name: existing_services, config: RegistrationConfig) -> Any:
    """
    Create a service instance by name.
    Args:
        service_name: The name of the service ('dns' or 'metadata').
        config: Validated registration config.
    Returns:
        An instance of the requested service class.
    Raises:
        ValueError: If the service is not supported.
    """
    if service_name not in SERVICE_REGISTRY:
        raise ValueError(f"Unsupported service '{service_name}'")
    return SERVICE_REGISTRY[service_name](config)
