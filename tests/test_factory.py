from unittest.mock import patch, MagicMock
import pytest

from hostdns.factory import service_factory
from hostdns.base import DNSBlueprint, MetadataBlueprint
from hostdns.base.config import RegistrationConfig


@pytest.fixture
def config():
    return RegistrationConfig(
        hostname="svc1",
        zone_name="example.com.",
        metadata_url="http://imds.test/latest",
        metadata_timeout=1.5,
    )


class TestServiceFactory:
    @patch("hostdns.aws.dns.boto3")
    def test_dns(self, mock_boto, config):
        mock_boto.client.return_value = MagicMock()
        result = service_factory("dns", config)
        assert isinstance(result, DNSBlueprint)
        assert mock_boto.client.call_args[0] == ("route53",)

    def test_metadata(self, config):
        result = service_factory("metadata", config)
        assert isinstance(result, MetadataBlueprint)
        assert result.base_url == "http://imds.test/latest"
        assert result.timeout == 1.5

    def test_unsupported_service(self, config):
        with pytest.raises(ValueError, match="Unsupported service"):
            service_factory("storage", config)
