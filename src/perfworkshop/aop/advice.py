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
"""Aspect and advice markers, and the JoinPoint handed to advice.

An aspect is a plain class decorated with :func:`aspect`. Each advice method
takes one :class:`JoinPoint` argument and is decorated with the kind of advice
and a pointcut pattern::

    @aspect
    class Timing:
        @around("service.*.get_*")
        def time_it(self, jp: JoinPoint) -> Any:
            return jp.proceed(*jp.args, **jp.kwargs)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple, TypeVar

C = TypeVar("C", bound=type)
F = TypeVar("F", bound=Callable[..., Any])

_ADVICE_ATTR = "__workshop_advice__"


class AdviceSpec(NamedTuple):
    """What an advice decorator records on a method."""

    kind: str
    pointcut: str


@dataclass
class JoinPoint:
    """One intercepted call.

    ``return_value`` is filled in before after-returning advice runs and
    ``exception`` before after-throwing advice runs. Inside around advice,
    ``proceed`` continues the call; called without arguments it reuses the
    original ones.
    """

    target: Any
    method_name: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    return_value: Any = None
    exception: Exception | None = None
    proceed: Callable[..., Any] | None = None


def aspect(cls: C) -> C:
    """Mark *cls* as an aspect; the weaver reads its advice and never advises it."""
    cls.__workshop_aspect__ = True  # type: ignore[attr-defined]
    return cls


def is_aspect(obj: Any) -> bool:
    return bool(getattr(type(obj), "__workshop_aspect__", False))


def advice_spec(method: Any) -> AdviceSpec | None:
    """The advice recorded on *method*, or ``None`` for an ordinary method."""
    return getattr(method, _ADVICE_ATTR, None)


def _advice(kind: str) -> Callable[[str], Callable[[F], F]]:
    def with_pointcut(pointcut: str) -> Callable[[F], F]:
        def mark(fn: F) -> F:
            setattr(fn, _ADVICE_ATTR, AdviceSpec(kind, pointcut))
            return fn

        return mark

    with_pointcut.__name__ = kind
    return with_pointcut


before = _advice("before")
after_returning = _advice("after_returning")
after_throwing = _advice("after_throwing")
after = _advice("after")
around = _advice("around")
