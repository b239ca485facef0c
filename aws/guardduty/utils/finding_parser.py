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

"""Finding payload parsing – decoding the EventBridge ``detail`` object into a
``Finding`` and deriving its severity label and console link.
"""

from __future__ import annotations

import json
from typing import Any

from .config import Config
from .errors import FindingParseError
from .models import Finding, build_console_url
from .severity import classify_severity

# JSON key -> Finding attribute, in the order they are validated.
_STRING_FIELDS: list[tuple[str, str]] = [
    ("id", "id"),
    ("accountId", "account_id"),
    ("region", "region"),
    ("title", "title"),
    ("description", "description"),
]
_SEVERITY_FIELD = "severity"


def _decode_object(raw: bytes) -> dict[str, Any]:
    # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise FindingParseError(f"finding payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise FindingParseError(
            f"finding payload must be a JSON object, got {type(data).__name__}"
        )
    return data


def _require_str(data: dict[str, Any], key: str) -> str:
    if key not in data or data[key] is None:
        raise FindingParseError(f"finding payload is missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise FindingParseError(
            f"finding field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _require_number(data: dict[str, Any], key: str) -> float:
    if key not in data or data[key] is None:
        raise FindingParseError(f"finding payload is missing required field '{key}'")
    value = data[key]
    # bool is an int subclass but never a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FindingParseError(
            f"finding field '{key}' must be a number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as exc:
        raise FindingParseError(f"finding field '{key}' is out of range for a number") from exc


def parse_finding(raw: bytes, config: Config) -> Finding:
    """Decode *raw* into a ``Finding``.

    Unknown keys are ignored. Raises ``FindingParseError`` on malformed JSON,
    a non-object payload, or a missing / mistyped required field.
    """
    data = _decode_object(raw)

    values: dict[str, Any] = {}
    for key, attr in _STRING_FIELDS:
        values[attr] = _require_str(data, key)
    severity = _require_number(data, _SEVERITY_FIELD)

    return Finding(
        severity=severity,
        severity_label=classify_severity(severity),
        console_url=build_console_url(config.aws_console_url, values["region"], values["id"]),
        raw=bytes(raw),
        **values,
    )
