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

"""GuardDuty finding data model."""

from __future__ import annotations

from dataclasses import dataclass, field

from .severity import SeverityLabel

CONSOLE_URL_TEMPLATE = "{base}/guardduty/home?region={region}#/findings?&macros=current&fId={finding_id}"


def build_console_url(base_console_url: str, region: str, finding_id: str) -> str:
    """Return the GuardDuty console deep link for one finding."""
    return CONSOLE_URL_TEMPLATE.format(base=base_console_url, region=region, finding_id=finding_id)


@dataclass(frozen=True)
class Finding:
    """One GuardDuty finding, fully derived.

    ``severity_label`` and ``console_url`` are computed by the parser before
    the instance is created; ``raw`` is the payload exactly as received and
    is only ever used for diagnostics.
    """
    id: str
    account_id: str
    region: str
    title: str
    description: str
    severity: float
    severity_label: SeverityLabel
    console_url: str
    raw: bytes = field(default=b"", repr=False, compare=False)
