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

"""Exception hierarchy – every failure a single finding can hit is one of
these; the caller decides whether it is fatal.
"""


class GuardDutyNotifierError(Exception):
    """Base class for all errors raised by the notifier."""


class ConfigError(GuardDutyNotifierError):
    """A required setting is missing; no event may be processed."""


class FindingParseError(GuardDutyNotifierError):
    """The raw finding payload could not be decoded into a ``Finding``."""


class SlackDeliveryError(GuardDutyNotifierError):
    """The Slack Web API call failed or was rejected."""
