"""AWS service factory.

Maps service names to their AWS implementations and knows how to build
each one from a :class:`~hostdns.base.config.RegistrationConfig`.
``SERVICE_REGISTRY`` is consumed by :func:`hostdns.factory.service_factory`.
"""

from typing import Any, Callable

from hostdns.aws.dns import DNS
from hostdns.aws.metadata import Metadata
from hostdns.base.config import RegistrationConfig


# Service registry for AWS
SERVICE_REGISTRY: dict[str, Callable[[RegistrationConfig], Any]] = {
    "dns": lambda config: DNS(config.aws),
    "metadata": lambda config: Metadata(config.metadata_url, config.metadata_timeout),
}
