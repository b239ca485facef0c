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

"""GuardDuty-to-Slack notification utilities.

Modules
-------
errors          Exception hierarchy (config, parse, delivery).
config          Environment settings validation and the immutable ``Config``.
severity        Numeric GuardDuty score to ``SeverityLabel`` classification.
models          ``Finding`` dataclass with derived label and console link.
finding_parser  Raw finding payload decoding into a ``Finding``.
slack           Block Kit message construction and ``chat.postMessage`` delivery.
dispatcher      Parse -> notify orchestration for one finding payload.
bootstrap       Once-only, thread-safe construction of the process-wide app.
"""
