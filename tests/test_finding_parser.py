"""Finding payload decoding and derived fields."""

from __future__ import annotations

import json

import pytest

from guardduty.utils.config import Config
from guardduty.utils.errors import FindingParseError
from guardduty.utils.finding_parser import parse_finding
from guardduty.utils.models import build_console_url
from guardduty.utils.severity import SeverityLabel

from conftest import finding_payload


def test_parse_populates_all_fields(config: Config) -> None:
    raw = finding_payload(severity=8)

    finding = parse_finding(raw, config)

    assert finding.id == "abc123"
    assert finding.account_id == "123456789012"
    assert finding.region == "us-east-1"
    assert finding.title.startswith("Unprotected port")
    assert finding.severity == 8.0
    assert isinstance(finding.severity, float)
    assert finding.severity_label is SeverityLabel.HIGH
    assert finding.raw == raw


def test_console_url_matches_template(config: Config) -> None:
    finding = parse_finding(finding_payload(), config)

    assert finding.console_url == (
        "https://us-east-1.console.aws.amazon.com/guardduty/home"
        "?region=us-east-1#/findings?&macros=current&fId=abc123"
    )


def test_build_console_url_uses_base_verbatim() -> None:
    assert build_console_url("https://console.example", "eu-west-1", "f1") == (
        "https://console.example/guardduty/home?region=eu-west-1#/findings?&macros=current&fId=f1"
    )


def test_parse_is_deterministic(config: Config) -> None:
    raw = finding_payload(severity=9.1, region="ap-south-1")

    first = parse_finding(raw, config)
    second = parse_finding(raw, config)

    assert first == second
    assert first.severity_label == second.severity_label == SeverityLabel.CRITICAL
    assert first.console_url == second.console_url


def test_unknown_fields_are_ignored(config: Config) -> None:
    raw = finding_payload(type="Recon:EC2/PortProbeUnprotectedPort", resource={"x": 1})
    assert parse_finding(raw, config).id == "abc123"


def test_out_of_range_severity_is_not_an_error(config: Config) -> None:
    finding = parse_finding(finding_payload(severity=42), config)
    assert finding.severity_label is SeverityLabel.UNKNOWN


@pytest.mark.parametrize("key", ["id", "accountId", "region", "title", "description", "severity"])
def test_missing_required_field(config: Config, key: str) -> None:
    detail = json.loads(finding_payload())
    del detail[key]

    with pytest.raises(FindingParseError, match=f"'{key}'"):
        parse_finding(json.dumps(detail).encode(), config)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("id", 123),
        ("region", ["us-east-1"]),
        ("title", None),
        ("severity", "8.0"),
        ("severity", True),
        ("severity", None),
    ],
)
def test_wrong_field_type(config: Config, key: str, value: object) -> None:
    with pytest.raises(FindingParseError, match=f"'{key}'"):
        parse_finding(finding_payload(**{key: value}), config)


@pytest.mark.parametrize("raw", [b"", b"{not json", b"\xff\xfe\x00", b"[]", b"null", b'"finding"'])
def test_malformed_payload(config: Config, raw: bytes) -> None:
    with pytest.raises(FindingParseError):
        parse_finding(raw, config)


def test_severity_too_large_for_float(config: Config) -> None:
    raw = b'{"id": "a", "accountId": "1", "region": "r", "title": "t", "description": "d", "severity": 1' + b"0" * 400 + b"}"

    with pytest.raises(FindingParseError, match="'severity'"):
        parse_finding(raw, config)


def test_number_over_digit_limit(config: Config) -> None:
    raw = b'{"id": "a", "accountId": "1", "region": "r", "title": "t", "description": "d", "severity": ' + b"9" * 5001 + b"}"

    with pytest.raises(FindingParseError, match="not valid JSON"):
        parse_finding(raw, config)


def test_deeply_nested_payload(config: Config) -> None:
    raw = b"[" * 200000 + b"]" * 200000

    with pytest.raises(FindingParseError, match="not valid JSON"):
        parse_finding(raw, config)
