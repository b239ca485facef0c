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

"""Process configuration – reading the ``APP_*`` environment variables and
failing fast when a required one is absent.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from shared.common import parse_bool_flag

from .errors import ConfigError

ENV_DEBUG_ENABLED = "APP_DEBUG_ENABLED"
ENV_AWS_CONSOLE_URL = "APP_AWS_CONSOLE_URL"
ENV_SLACK_TOKEN = "APP_SLACK_TOKEN"
ENV_SLACK_CHANNEL = "APP_SLACK_CHANNEL"

# Check order is observable: the first missing name is the one reported.
REQUIRED_SETTINGS: tuple[str, ...] = (
    ENV_SLACK_TOKEN,
    ENV_SLACK_CHANNEL,
    ENV_AWS_CONSOLE_URL,
)


@dataclass(frozen=True)
class Config:
    """Validated, read-only settings shared by the dispatcher and notifier."""
    slack_token: str = field(repr=False)
    slack_channel: str
    aws_console_url: str
    debug_enabled: bool = False


def build_config(env: Mapping[str, str] | None = None) -> Config:
    """Build a ``Config`` from *env* (default: ``os.environ``).

    Raises ``ConfigError`` naming the first missing required variable.
    Empty values count as missing.
    """
    env = os.environ if env is None else env
    for name in REQUIRED_SETTINGS:
        if not env.get(name):
            raise ConfigError(f"missing env var {name}")

    return Config(
        slack_token=env[ENV_SLACK_TOKEN],
        slack_channel=env[ENV_SLACK_CHANNEL],
        aws_console_url=env[ENV_AWS_CONSOLE_URL],
        debug_enabled=parse_bool_flag(env.get(ENV_DEBUG_ENABLED)),
    )
