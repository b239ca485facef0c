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

"""Process-wide app bootstrap – builds ``Config`` and the ``Dispatcher`` once
per process, even when several invocations arrive together.

Whatever the first build produced is what every caller sees: the same
``Dispatcher`` instance, or the same ``ConfigError`` instance re-raised.
"""

from __future__ import annotations

import threading
from typing import Callable, Mapping

from .config import Config, build_config
from .dispatcher import Dispatcher


class LazyApp:
    """Thread-safe, build-once holder for the process ``Dispatcher``."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        config_builder: Callable[[Mapping[str, str] | None], Config] = build_config,
        dispatcher_factory: Callable[[Config], Dispatcher] = Dispatcher,
    ) -> None:
        self._env = env
        self._config_builder = config_builder
        self._dispatcher_factory = dispatcher_factory
        self._lock = threading.Lock()
        self._done = False
        self._dispatcher: Dispatcher | None = None
        self._error: Exception | None = None

    def get(self) -> Dispatcher:
        """Return the shared ``Dispatcher``, building it on first use."""
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        config = self._config_builder(self._env)
                        self._dispatcher = self._dispatcher_factory(config)
                    except Exception as exc:
                        self._error = exc
                    self._done = True
        if self._error is not None:
            raise self._error
        if self._dispatcher is None:
            raise RuntimeError("app bootstrap finished without a dispatcher")
        return self._dispatcher
