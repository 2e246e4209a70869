"""Tests for the zone resolve / metadata fetch / record publish sequence."""

from unittest.mock import MagicMock
import pytest

from hostdns.base.config import RegistrationConfig
from hostdns.base.dns import DNSBlueprint
from hostdns.base.exceptions import (
    DNSError,
    MetadataError,
    RecordPublishError,
    ZoneNotFoundError,
    ZoneResolutionError,
)
from hostdns.base.metadata import MetadataBlueprint
from hostdns.registrar import HostRecordRequest, Registrar, build_record_name, zone_path


def _registrar(sleeps=None, **overrides):
    values = {"hostname": "svc1", "zone_name": "internal.example.com."}
    values.update(overrides)
    config = RegistrationConfig(**values)
    dns = MagicMock(spec=DNSBlueprint)
    dns.find_zone_id.return_value = "/hostedzone/Z123"
    metadata = MagicMock(spec=MetadataBlueprint)
    metadata.get_metadata.side_effect = {
        "local-ipv4": "10.0.0.5",
        "public-hostname": "ec2-54-1-2-3.compute-1.amazonaws.com",
    }.__getitem__
    sink = sleeps if sleeps is not None else []
    return Registrar(config, dns, metadata, sleep=sink.append), dns, metadata


class TestRecordName:
    @pytest.mark.parametrize(
        "host, zone, expected",
        [
            ("svc1", "internal.example.com.", "svc1.internal.example.com."),
            ("svc1.", "internal.example.com.", "svc1.internal.example.com."),
            ("ip-10-0-0-5.ec2.internal", "example.com.", "ip-10-0-0-5.ec2.internal.example.com."),
            ("svc1.internal.example.com.", None, "svc1.internal.example.com"),
        ],
    )
    def test_full_hostname_joined_with_zone(self, host, zone, expected):
        assert build_record_name(host, zone) == expected


class TestZonePath:
    def test_prefixes_bare_id(self):
        assert zone_path("Z123") == "/hostedzone/Z123"

    def test_keeps_existing_prefix(self):
        assert zone_path("/hostedzone/Z123") == "/hostedzone/Z123"

    def test_prefix_without_leading_slash(self):
        assert zone_path("hostedzone/Z123") == "/hostedzone/Z123"

    def test_stray_leading_slash(self):
        assert zone_path(" /Z123 ") == "/hostedzone/Z123"


class TestResolveZone:
    def test_explicit_id_skips_lookup(self):
        reg, dns, _ = _registrar(zone_id="Z999")
        assert reg.resolve_zone() == "/hostedzone/Z999"
        dns.find_zone_id.assert_not_called()

    def test_lookup_by_name(self):
        sleeps = []
        reg, dns, _ = _registrar(sleeps)
        assert reg.resolve_zone() == "/hostedzone/Z123"
        dns.find_zone_id.assert_called_once_with("internal.example.com.")
        assert sleeps == [0]

    def test_transient_errors_are_retried(self):
        sleeps = []
        reg, dns, _ = _registrar(sleeps)
        dns.find_zone_id.side_effect = [
            DNSError("throttled"),
            ZoneNotFoundError("not yet"),
            "/hostedzone/Z123",
        ]
        assert reg.resolve_zone() == "/hostedzone/Z123"
        assert sleeps == [0, 2, 4]

    def test_exhaustion_is_fatal(self):
        sleeps = []
        reg, dns, _ = _registrar(sleeps)
        dns.find_zone_id.side_effect = DNSError("down")
        with pytest.raises(ZoneResolutionError) as exc_info:
            reg.resolve_zone()
        assert exc_info.value.fatal
        assert dns.find_zone_id.call_count == 5
        assert sleeps == [0, 2, 4, 6, 8]

    def test_backoff_overridable(self):
        sleeps = []
        reg, dns, _ = _registrar(sleeps, retry_step=0.0, max_retry_steps=1)
        dns.find_zone_id.side_effect = DNSError("down")
        with pytest.raises(ZoneResolutionError):
            reg.resolve_zone()
        assert sleeps == [0, 0]


class TestFetchTarget:
    def test_a_record_uses_private_ip(self):
        reg, _, metadata = _registrar()
        assert reg.fetch_target() == "10.0.0.5"
        metadata.get_metadata.assert_called_once_with("local-ipv4")

    def test_cname_uses_public_hostname(self):
        reg, _, metadata = _registrar(cname=True)
        assert reg.fetch_target() == "ec2-54-1-2-3.compute-1.amazonaws.com"
        metadata.get_metadata.assert_called_once_with("public-hostname")


class TestPublish:
    def test_requires_zone_id(self):
        reg, dns, _ = _registrar()
        with pytest.raises(ZoneNotFoundError):
            reg.publish(HostRecordRequest("", "svc1.example.com.", "A", "10.0.0.5"))
        dns.upsert_record.assert_not_called()

    def test_comment_per_kind(self):
        assert HostRecordRequest("/hostedzone/Z", "n", "A", "v").comment == "Host A Record Created"
        assert HostRecordRequest("/hostedzone/Z", "n", "CNAME", "v").comment == "Host CName Record Created"


class TestRun:
    def test_end_to_end_a_record(self):
        reg, dns, _ = _registrar()
        request = reg.run()
        assert request == HostRecordRequest(
            zone_id="/hostedzone/Z123",
            record_name="svc1.internal.example.com.",
            record_type="A",
            value="10.0.0.5",
            ttl=0,
            weight=1,
            set_identifier="svc1",
        )
        dns.upsert_record.assert_called_once_with(
            "/hostedzone/Z123",
            "svc1.internal.example.com.",
            "A",
            "10.0.0.5",
            ttl=0,
            weight=1,
            set_identifier="svc1",
            comment="Host A Record Created",
        )

    def test_cname_with_explicit_zone(self):
        reg, dns, _ = _registrar(zone_id="Z777", cname=True)
        request = reg.run()
        dns.find_zone_id.assert_not_called()
        assert request.zone_id == "/hostedzone/Z777"
        assert request.record_type == "CNAME"
        assert request.value == "ec2-54-1-2-3.compute-1.amazonaws.com"
        assert (request.ttl, request.weight) == (0, 1)

    def test_metadata_failure_stops_before_publish(self):
        reg, dns, metadata = _registrar()
        metadata.get_metadata.side_effect = MetadataError("no imds")
        with pytest.raises(MetadataError):
            reg.run()
        dns.upsert_record.assert_not_called()

    def test_publish_failure_propagates(self):
        reg, dns, _ = _registrar()
        dns.upsert_record.side_effect = RecordPublishError("denied")
        with pytest.raises(RecordPublishError):
            reg.run()
