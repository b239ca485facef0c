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

"""Slack notification – builds the Block Kit message for a finding and posts
it to the configured channel through the ``chat.postMessage`` Web API method.

Block layout
------------
The order below is what Slack renders and must not change:

1. ``header``  – finding title
2. ``section`` – fields: severity label, region, account id
3. ``section`` – description as plain text
4. ``divider``
5. ``actions`` – a single "View in Console" link button

Sending is one HTTP call with no retry; posting the same finding twice
produces two messages.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol

import requests

from .errors import SlackDeliveryError
from .models import Finding

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"
SLACK_TIMEOUT_SECONDS = 30

ACTIONS_BLOCK_ID = "actions"
VIEW_BUTTON_ACTION_ID = "view"
VIEW_BUTTON_LABEL = "View in Console"


# ---------------------------------------------------------------------------
# Block Kit helpers
# ---------------------------------------------------------------------------

def _plain_text(text: str, *, emoji: bool = False) -> Dict[str, Any]:
    return {"type": "plain_text", "text": text, "emoji": emoji}


def _mrkdwn(text: str) -> Dict[str, Any]:
    return {"type": "mrkdwn", "text": text}


def _field(label: str, value: str) -> Dict[str, Any]:
    return _mrkdwn(f"*{label}:* {value}")


def build_blocks(finding: Finding) -> List[Dict[str, Any]]:
    """Assemble the ``blocks`` array for *finding*."""
    return [
        {
            "type": "header",
            "text": _plain_text(finding.title, emoji=True),
        },
        {
            "type": "section",
            "fields": [
                _field("Severity", str(finding.severity_label)),
                _field("Region", finding.region),
                _field("Account", finding.account_id),
            ],
        },
        {
            "type": "section",
            "text": _plain_text(finding.description),
        },
        {"type": "divider"},
        {
            "type": "actions",
            "block_id": ACTIONS_BLOCK_ID,
            "elements": [
                {
                    "type": "button",
                    "action_id": VIEW_BUTTON_ACTION_ID,
                    "text": _plain_text(VIEW_BUTTON_LABEL),
                    "url": finding.console_url,
                }
            ],
        },
    ]


# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------

class ChatClient(Protocol):
    """A client already bound to one destination channel."""

    def post_message(self, text: str, blocks: List[Dict[str, Any]]) -> None: ...


class SlackClient:
    """Posts messages to a single Slack channel with a bot token."""

    def __init__(
        self,
        token: str,
        channel: str,
        *,
        session: requests.Session | None = None,
        api_url: str = SLACK_POST_MESSAGE_URL,
        timeout: float = SLACK_TIMEOUT_SECONDS,
    ) -> None:
        self._token = token
        self._channel = channel
        self._session = session or requests.Session()
        self._api_url = api_url
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"SlackClient(channel={self._channel!r})"

    def post_message(self, text: str, blocks: List[Dict[str, Any]]) -> None:
        """POST one message and raise ``SlackDeliveryError`` on any failure."""
        payload = {"channel": self._channel, "text": text, "blocks": blocks}
        try:
            resp = self._session.post(
                self._api_url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Content-Type": "application/json; charset=utf-8",
                },
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise SlackDeliveryError(f"Slack request failed: {exc}") from exc

        if resp.status_code != 200:
            raise SlackDeliveryError(
                f"Slack request failed.\n"
                f"  Status : {resp.status_code}\n"
                f"  Body   : {resp.text}"
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise SlackDeliveryError(f"Slack returned a non-JSON body: {resp.text!r}") from exc

        # The Web API reports most failures as HTTP 200 with ok=false.
        if not isinstance(body, dict) or not body.get("ok"):
            error = body.get("error", "unknown_error") if isinstance(body, dict) else "unknown_error"
            raise SlackDeliveryError(f"Slack API error: {error}")


def notify_slack(finding: Finding, client: ChatClient) -> None:
    """Build the message for *finding* and send it through *client*."""
    # The title doubles as fallback text for notifications and clients without blocks.
    client.post_message(finding.title, build_blocks(finding))
