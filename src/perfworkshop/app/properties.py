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
"""Awesome web service configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from perfworkshop.core.config import config_properties
from perfworkshop.kernel.exceptions import InvalidConfigurationException


@config_properties(prefix="workshop.service")
@dataclass
class ServiceProperties:
    """Configuration for AwesomeWebService (workshop.service.*).

    ``max_runs`` is exclusive; sleep bounds are inclusive milliseconds.
    """

    max_runs: int = 300
    min_sleep_ms: int = 5
    max_sleep_ms: int = 14
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_runs < 1:
            raise InvalidConfigurationException(
                f"workshop.service.max_runs must be at least 1, got {self.max_runs}",
                code="CONFIG_MAX_RUNS",
                context={"max_runs": self.max_runs},
            )
        if self.min_sleep_ms < 0 or self.max_sleep_ms < self.min_sleep_ms:
            raise InvalidConfigurationException(
                "workshop.service sleep bounds must satisfy 0 <= min_sleep_ms <= max_sleep_ms, "
                f"got {self.min_sleep_ms}..{self.max_sleep_ms}",
                code="CONFIG_SLEEP_BOUNDS",
                context={"min_sleep_ms": self.min_sleep_ms, "max_sleep_ms": self.max_sleep_ms},
            )
