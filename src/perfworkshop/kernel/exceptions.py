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
"""Exceptions raised by perf-workshop.

The command line catches :class:`WorkshopException` and exits with status 1,
so anything a user can cause (bad settings, a broken context file) derives
from it. Rule violations are business errors; wiring failures are
infrastructure errors.
"""

from __future__ import annotations

from typing import Any


class WorkshopException(Exception):
    """Base class of every workshop error.

    Args:
        message: Human-readable description.
        code: Stable machine-readable identifier, e.g. ``CONFIG_MAX_RUNS``.
        context: Values that explain the failure.
    """

    def __init__(self, message: str, code: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict[str, Any] = dict(context or {})


class BusinessException(WorkshopException):
    """A workshop rule was violated."""


class InvalidConfigurationException(BusinessException):
    """A setting is missing, malformed, or out of range."""


class InfrastructureException(WorkshopException):
    """The application could not be wired or started."""
