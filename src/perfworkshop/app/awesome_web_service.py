# Copyright 2026 Firefly Software Solutions Inc.
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
"""AwesomeWebService — a toy service whose work takes a random amount of time."""

from __future__ import annotations

import contextlib
import random
import time
from collections.abc import Callable

import structlog

from perfworkshop.app.properties import ServiceProperties
from perfworkshop.container.stereotypes import service
from perfworkshop.core.config import Config

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@service
class AwesomeWebService:
    """Simulates variable-length work.

    Internal calls from :meth:`get_awesome_data` to :meth:`magic_method` go
    through ``proxy``, which defaults to the service itself. Pass a wrapper
    at construction time, or install one later with :meth:`set_proxy`, to
    observe those calls from outside.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        properties: ServiceProperties | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] | None = None,
        proxy: AwesomeWebService | None = None,
    ) -> None:
        self._properties = properties or (config or Config()).bind(ServiceProperties)
        self._rng = rng or random.Random(self._properties.seed)
        self._sleep = sleep or time.sleep
        self._proxy = proxy if proxy is not None else self
        self._logger = structlog.get_logger("perfworkshop.service")

    @property
    def properties(self) -> ServiceProperties:
        return self._properties

    def set_proxy(self, proxy: AwesomeWebService) -> None:
        """Replace the reference used for internal calls."""
        self._proxy = proxy

    def get_awesome_data(self) -> int:
        """Call :meth:`magic_method` a random number of times, then return a random int.

        The number of calls is drawn uniformly from ``[0, max_runs)``; the
        result spans the signed 32-bit range.
        """
        runs = self._rng.randrange(self._properties.max_runs)
        self._logger.debug("runs", runs=runs)
        for _ in range(runs):
            self._proxy.magic_method()
        result = self._rng.randint(INT32_MIN, INT32_MAX)
        self._logger.info("result", result=result)
        return result

    def magic_method(self) -> None:
        # Placeholder work: block for min_sleep_ms..max_sleep_ms inclusive.
        delay_ms = self._rng.randint(self._properties.min_sleep_ms, self._properties.max_sleep_ms)
        with contextlib.suppress(InterruptedError):
            self._sleep(delay_ms / 1000)
