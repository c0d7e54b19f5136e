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
"""LoggingAspect — times get_awesome_data and counts magic_method calls."""

from __future__ import annotations

from typing import Any

import structlog

from perfworkshop.aop.advice import JoinPoint, around, aspect, before


@aspect
class LoggingAspect:
    """Logs ``before`` / ``after`` around the heavy call and the running counter.

    ``counter`` lives as long as the aspect bean and is never reset.
    """

    def __init__(self) -> None:
        self.counter = 0
        self._logger = structlog.get_logger("perfworkshop.aspect")

    @around("service.AwesomeWebService.get_awesome_data")
    def log_around_get_awesome_data(self, jp: JoinPoint) -> Any:
        self._logger.info("before")
        try:
            return jp.proceed(*jp.args, **jp.kwargs)  # type: ignore[misc]
        finally:
            self._logger.info("after")
            self._logger.info("counter", counter=self.counter)

    @before("service.AwesomeWebService.magic_method")
    def count_magic_method(self, jp: JoinPoint) -> None:
        self.counter += 1
