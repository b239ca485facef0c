"""EventBridge envelope adapter for the Lambda runtime."""

from __future__ import annotations

import json
from typing import Any

import pytest
from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent

from guardduty import lambda_handler as handler_module
from guardduty.lambda_handler import detail_bytes, lambda_handler, process_event
from guardduty.utils.bootstrap import LazyApp
from guardduty.utils.dispatcher import Dispatcher
from guardduty.utils.errors import ConfigError, FindingParseError

from conftest import RecordingChatClient


def _event(**detail_overrides: Any) -> dict[str, Any]:
    detail: dict[str, Any] = {
        "schemaVersion": "2.0",
        "id": "abc123",
        "accountId": "123456789012",
        "region": "eu-west-1",
        "title": "Test",
        "description": "desc",
        "severity": 9.5,
    }
    detail.update(detail_overrides)
    return {
        "version": "0",
        "id": "event-1",
        "detail-type": "GuardDuty Finding",
        "source": "aws.guardduty",
        "account": "123456789012",
        "time": "2026-10-19T12:00:00Z",
        "region": "eu-west-1",
        "resources": [],
        "detail": detail,
    }


@pytest.fixture
def client() -> RecordingChatClient:
    return RecordingChatClient()


@pytest.fixture
def app(app_env: dict[str, str], client: RecordingChatClient) -> LazyApp:
    return LazyApp(app_env, dispatcher_factory=lambda cfg: Dispatcher(cfg, client=client))


def test_detail_bytes_unwraps_envelope() -> None:
    raw = detail_bytes(EventBridgeEvent(_event()))
    assert json.loads(raw)["id"] == "abc123"
    assert b"GuardDuty Finding" not in raw


def test_process_event_posts_finding(
    app: LazyApp, client: RecordingChatClient, capsys: pytest.CaptureFixture[str]
) -> None:
    process_event(EventBridgeEvent(_event()), app)

    assert len(client.calls) == 1
    fields = client.calls[0]["blocks"][1]["fields"]
    assert "*Severity:* critical" in [f["text"] for f in fields]
    # envelope is logged as one JSON line
    logged = json.loads(capsys.readouterr().out.splitlines()[0])
    assert logged["id"] == "event-1"


def test_process_event_parse_error(app: LazyApp, client: RecordingChatClient) -> None:
    event = _event()
    del event["detail"]["severity"]

    with pytest.raises(FindingParseError):
        process_event(EventBridgeEvent(event), app)
    assert client.calls == []


def test_missing_config_fails_every_invocation(client: RecordingChatClient) -> None:
    app = LazyApp({}, dispatcher_factory=lambda cfg: Dispatcher(cfg, client=client))

    for _ in range(2):
        with pytest.raises(ConfigError, match="APP_SLACK_TOKEN"):
            process_event(EventBridgeEvent(_event()), app)
    assert client.calls == []


def test_lambda_handler_uses_module_app(
    monkeypatch: pytest.MonkeyPatch, app: LazyApp, client: RecordingChatClient
) -> None:
    monkeypatch.setattr(handler_module, "_app", app)

    lambda_handler(_event(), None)

    assert len(client.calls) == 1
    assert client.calls[0]["text"] == "Test"
