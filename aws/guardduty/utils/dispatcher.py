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

"""Single-finding orchestration: parse the raw payload, then notify Slack.

Either step failing aborts the sequence and the error propagates unchanged;
a parse failure therefore never reaches Slack.
"""

from __future__ import annotations

from .config import Config
from .finding_parser import parse_finding
from .models import Finding
from .slack import ChatClient, SlackClient, notify_slack


class Dispatcher:
    """Parse -> notify pipeline bound to one ``Config`` and one chat client."""

    def __init__(self, config: Config, client: ChatClient | None = None) -> None:
        self.config = config
        self.client = client if client is not None else SlackClient(config.slack_token, config.slack_channel)

    def parse(self, raw: bytes) -> Finding:
        return parse_finding(raw, self.config)

    def process(self, raw: bytes) -> Finding:
        """Handle one finding payload; exactly one message is sent on success."""
        finding = self.parse(raw)
        if self.config.debug_enabled:
            _debug_log(finding)
        notify_slack(finding, self.client)
        return finding


def _debug_log(finding: Finding) -> None:
    try:
        print(f"finding id={finding.id} severity={finding.severity:.1f}", flush=True)
    except OSError:
        pass
