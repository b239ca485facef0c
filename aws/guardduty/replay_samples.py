#!/usr/bin/env python3
#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Replay locally stored GuardDuty sample events through the Slack notifier.

Input:
- JSON array of EventBridge events (default: fixtures/samples.json); each
  event's ``detail`` is the GuardDuty finding.

Events are processed in order and the run stops at the first failure,
reporting the id of the event that failed.

Environment variables
---------------------
Same as the Lambda handler: APP_SLACK_TOKEN, APP_SLACK_CHANNEL,
APP_AWS_CONSOLE_URL (required) and APP_DEBUG_ENABLED (optional).
A ``.env`` file in the working directory is loaded first when present;
variables already set in the environment take precedence.

Usage examples
--------------
# Post every sample to the configured channel
python3 replay_samples.py --file fixtures/samples.json

# Dry-run (print each chat.postMessage payload without sending)
python3 replay_samples.py --dry-run
"""

from __future__ import annotations

import argparse
import json
import os
from typing import Any, Dict, List

from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent
from dotenv import load_dotenv

from guardduty.lambda_handler import detail_bytes
from guardduty.utils.config import build_config
from guardduty.utils.dispatcher import Dispatcher
from guardduty.utils.errors import ConfigError, GuardDutyNotifierError
from shared.common import parse_runner_debug, set_verbose_enabled, vprint

DEFAULT_SAMPLES_FILE = "fixtures/samples.json"
DOTENV_FILE = ".env"


class DryRunClient:
    """Chat client that prints the payload instead of posting it."""

    def __init__(self, channel: str) -> None:
        self._channel = channel

    def post_message(self, text: str, blocks: List[Dict[str, Any]]) -> None:
        payload = {"channel": self._channel, "text": text, "blocks": blocks}
        print(json.dumps(payload, indent=2))


def load_sample_events(path: str) -> List[Dict[str, Any]]:
    """Load the JSON array of EventBridge events from *path*."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise SystemExit(f"ERROR: read {path}: {exc}")
    except json.JSONDecodeError as exc:
        raise SystemExit(f"ERROR: parse {path}: {exc}")

    if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
        raise SystemExit(f"ERROR: parse {path}: expected a JSON array of event objects")
    return data


def process_samples(dispatcher: Dispatcher, events: List[Dict[str, Any]]) -> int:
    """Dispatch each event's ``detail`` in order; stop at the first failure."""
    for raw_event in events:
        event = EventBridgeEvent(raw_event)
        event_id = raw_event.get("id", "")
        vprint(f"Processing sample event id={event_id}")
        try:
            finding = dispatcher.process(detail_bytes(event))
        except GuardDutyNotifierError as exc:
            raise SystemExit(f"ERROR: process id={event_id}: {exc}")
        vprint(f"Sent finding id={finding.id} severity={finding.severity_label}")
    return len(events)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replay GuardDuty sample events through the Slack notifier")
    p.add_argument(
        "--file",
        "-f",
        default=DEFAULT_SAMPLES_FILE,
        help=f"JSON array of EventBridge events (default: {DEFAULT_SAMPLES_FILE})",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print each Slack payload to stdout instead of sending it",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logs (also enabled when RUNNER_DEBUG=1)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    # Values already in the environment win over the file.
    if os.path.exists(DOTENV_FILE):
        load_dotenv(DOTENV_FILE)
        vprint(f"Loaded settings from {DOTENV_FILE}")

    try:
        config = build_config()
    except ConfigError as exc:
        raise SystemExit(f"ERROR: {exc}")

    client = DryRunClient(config.slack_channel) if args.dry_run else None
    dispatcher = Dispatcher(config, client=client)
    vprint(f"Replaying {args.file} to channel {config.slack_channel} (dry_run={bool(args.dry_run)})")

    events = load_sample_events(args.file)
    count = process_samples(dispatcher, events)
    print(f"Processed {count} sample event(s)")


if __name__ == "__main__":
    main()
