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
"""Errors raised while defining, finding, or building beans."""

from __future__ import annotations

from perfworkshop.kernel.exceptions import InfrastructureException


class BeanCreationException(InfrastructureException):
    """A bean could not be made available; the context cannot start.

    ``subsystem`` names the step that failed (``definition``, ``lookup``,
    ``startup``) and ``provider`` the bean or resource involved.
    """

    def __init__(self, subsystem: str, provider: str, reason: str) -> None:
        super().__init__(
            f"{subsystem} failed for '{provider}': {reason}",
            code=f"BEAN_CREATION_{subsystem.upper()}",
            context={"subsystem": subsystem, "provider": provider},
        )
        self.subsystem = subsystem
        self.provider = provider
        self.reason = reason


class NoSuchBeanError(BeanCreationException):
    """Nothing is registered under the requested name or type."""

    def __init__(self, wanted: str, *, required_by: str | None = None, candidates: list[str] | None = None) -> None:
        self.wanted = wanted
        self.required_by = required_by
        self.candidates = list(candidates or [])

        reason = f"no bean '{wanted}' is registered"
        if required_by:
            reason += f" (required by {required_by})"
        if self.candidates:
            reason += f"; did you mean {', '.join(self.candidates)}?"
        super().__init__("lookup", required_by or wanted, reason)


class BeanCurrentlyInCreationError(BeanCreationException):
    """A bean depends on itself through its constructor arguments.

    ``chain`` is the construction path, ending with the class that closed
    the loop.
    """

    def __init__(self, chain: list[type]) -> None:
        self.chain = list(chain)
        path = " -> ".join(cls.__name__ for cls in self.chain)
        super().__init__("lookup", self.chain[-1].__name__, f"circular dependency: {path}")


class BeanDefinitionException(BeanCreationException):
    """The context resource is malformed or names a class that cannot be loaded."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        super().__init__("definition", resource, reason)
