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

"""AWS Lambda entry point – receives a GuardDuty finding through an
EventBridge rule and forwards it to Slack.

Environment variables
---------------------
APP_SLACK_TOKEN      (required)  Slack bot token (xoxb-...).
APP_SLACK_CHANNEL    (required)  Destination channel id (C...).
APP_AWS_CONSOLE_URL  (required)  Console base URL, e.g. https://us-east-1.console.aws.amazon.com
APP_DEBUG_ENABLED    (optional)  ``true`` logs each finding's id and severity.

Handler: ``guardduty.lambda_handler.lambda_handler``
"""

from __future__ import annotations

import json
import sys

from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from guardduty.utils.bootstrap import LazyApp

_app = LazyApp()


def _log_event(event: EventBridgeEvent) -> None:
    try:
        print(json.dumps(event.raw_event))
    except (TypeError, ValueError) as exc:
        print(f"ERROR marshalling event: {exc}", file=sys.stderr)


def detail_bytes(event: EventBridgeEvent) -> bytes:
    """Re-encode the envelope's ``detail`` object as the raw finding payload."""
    return json.dumps(event.get("detail")).encode("utf-8")


def process_event(event: EventBridgeEvent, app: LazyApp) -> None:
    """Bootstrap on first use, log the envelope, then dispatch its finding."""
    dispatcher = app.get()
    _log_event(event)
    dispatcher.process(detail_bytes(event))


@event_source(data_class=EventBridgeEvent)
def lambda_handler(event: EventBridgeEvent, context: LambdaContext) -> None:
    process_event(event, _app)
