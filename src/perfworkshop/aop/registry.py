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
"""AspectRegistry: the advice of every registered aspect, looked up by method."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from perfworkshop.aop.advice import advice_spec
from perfworkshop.aop.pointcut import matches_pointcut


@dataclass(frozen=True)
class AdviceBinding:
    """One advice method of one aspect instance."""

    kind: str
    pointcut: str
    handler: Callable[..., Any]
    aspect_name: str


class AspectRegistry:
    """Advice bindings in registration order.

    Aspects apply in the order they were registered; the advice methods of a
    single aspect apply in method-name order.
    """

    def __init__(self) -> None:
        self._bindings: list[AdviceBinding] = []

    def __len__(self) -> int:
        return len(self._bindings)

    def register(self, aspect_instance: Any) -> int:
        """Add the advice methods of *aspect_instance*; returns how many were found."""
        aspect_name = type(aspect_instance).__name__
        found = [
            AdviceBinding(spec.kind, spec.pointcut, method, aspect_name)
            for _, method in inspect.getmembers(aspect_instance, inspect.ismethod)
            if (spec := advice_spec(method)) is not None
        ]
        self._bindings.extend(found)
        return len(found)

    def get_matching(self, qualified_name: str) -> list[AdviceBinding]:
        return [b for b in self._bindings if matches_pointcut(b.pointcut, qualified_name)]
