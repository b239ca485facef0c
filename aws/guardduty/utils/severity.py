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

"""GuardDuty severity classification.

GuardDuty scores findings on a 0.0–10.0 scale. The buckets are half-open with
the lower bound inclusive; 10 itself is still critical, anything outside the
scale (or not a number at all) is ``unknown``.
"""

from __future__ import annotations

import math
from enum import StrEnum


class SeverityLabel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


# (lower bound inclusive, upper bound exclusive, label)
_SEVERITY_BUCKETS: list[tuple[float, float, SeverityLabel]] = [
    (0.0, 4.0, SeverityLabel.LOW),
    (4.0, 7.0, SeverityLabel.MEDIUM),
    (7.0, 9.0, SeverityLabel.HIGH),
]

MAX_SEVERITY = 10.0


def classify_severity(score: float) -> SeverityLabel:
    """Map a numeric score to its ``SeverityLabel``. Never raises."""
    try:
        value = float(score)
    except (TypeError, ValueError, OverflowError):
        return SeverityLabel.UNKNOWN
    if math.isnan(value):
        return SeverityLabel.UNKNOWN

    for low, high, label in _SEVERITY_BUCKETS:
        if low <= value < high:
            return label
    if 9.0 <= value <= MAX_SEVERITY:
        return SeverityLabel.CRITICAL
    return SeverityLabel.UNKNOWN
