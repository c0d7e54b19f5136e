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
"""Weaving: replacing a bean's methods with wrappers that run matching advice.

Wrappers are stored on the instance, not the class. A call that reaches the
method through the instance, including ``self.method()`` from inside the
bean or a call through a proxy reference to it, therefore runs the advice.
"""

from __future__ import annotations

import functools
import inspect
from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

from perfworkshop.aop.advice import JoinPoint
from perfworkshop.aop.registry import AdviceBinding, AspectRegistry

logger = structlog.get_logger("perfworkshop.aop")


class AdviceChain:
    """The advice matched for one method.

    :meth:`run` executes, in order: before advice; the around advice, nested
    with the first binding outermost, with the original method innermost;
    after-returning or after-throwing advice; and after advice, which runs
    whatever happened. An exception from the method is re-raised unchanged.
    """

    def __init__(self, bindings: list[AdviceBinding]) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        for binding in bindings:
            self._handlers[binding.kind].append(binding.handler)

    def run(self, jp: JoinPoint, original: Callable[..., Any]) -> Any:
        for handler in self._handlers["before"]:
            handler(jp)
        try:
            jp.return_value = self._call_through_around(jp, original)
        except Exception as exc:
            jp.exception = exc
            for handler in self._handlers["after_throwing"]:
                handler(jp)
            raise
        else:
            for handler in self._handlers["after_returning"]:
                handler(jp)
            return jp.return_value
        finally:
            for handler in self._handlers["after"]:
                handler(jp)

    def _call_through_around(self, jp: JoinPoint, original: Callable[..., Any]) -> Any:
        def call_original(*args: Any, **kwargs: Any) -> Any:
            return original(*(args or jp.args), **(kwargs or jp.kwargs))

        step: Callable[..., Any] = call_original
        for handler in reversed(self._handlers["around"]):
            step = _around_step(handler, jp, step)
        return step()


def _around_step(handler: Callable[..., Any], jp: JoinPoint, inner: Callable[..., Any]) -> Callable[..., Any]:
    """Run *handler* with ``jp.proceed`` pointing at *inner*, then restore it."""

    def step(*args: Any, **kwargs: Any) -> Any:
        if args or kwargs:
            jp.args, jp.kwargs = args, kwargs
        outer = jp.proceed
        jp.proceed = inner
        try:
            return handler(jp)
        finally:
            jp.proceed = outer

    return step


def weave_bean(bean: Any, qualified_prefix: str, registry: AspectRegistry) -> list[str]:
    """Wrap every public method of *bean* that some advice in *registry* matches.

    Methods are addressed as ``f"{qualified_prefix}.{name}"``. Coroutine
    methods are left alone. Returns the names of the wrapped methods.
    """
    woven: list[str] = []
    for name, method in inspect.getmembers(bean, inspect.ismethod):
        if name.startswith("_"):
            continue
        qualified_name = f"{qualified_prefix}.{name}"
        bindings = registry.get_matching(qualified_name)
        if not bindings:
            continue
        if inspect.iscoroutinefunction(method):
            logger.warning("async_method_not_woven", method=qualified_name)
            continue
        setattr(bean, name, _advised(bean, name, method, AdviceChain(bindings)))
        woven.append(name)
    return woven


def _advised(bean: Any, name: str, method: Callable[..., Any], chain: AdviceChain) -> Callable[..., Any]:
    @functools.wraps(method)
    def advised(*args: Any, **kwargs: Any) -> Any:
        return chain.run(JoinPoint(bean, name, args, kwargs), method)

    return advised
