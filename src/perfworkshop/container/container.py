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
"""Singleton bean container with constructor injection from type hints."""

from __future__ import annotations

import difflib
import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any, TypeVar, Union, cast

from perfworkshop.container.exceptions import BeanCurrentlyInCreationError, NoSuchBeanError

T = TypeVar("T")


@dataclass
class _Slot:
    bean_class: type
    name: str
    instance: Any = field(default=None, repr=False)


class Container:
    """Holds at most one instance of every registered class.

    Constructor parameters are filled from their type hints. A parameter that
    has a default, or accepts ``None``, is only filled when its type is
    registered and not already under construction; otherwise it keeps its
    default. That is what lets ``AwesomeWebService`` declare a
    ``proxy: AwesomeWebService | None`` parameter without recursing.
    """

    def __init__(self) -> None:
        self._slots: dict[type, _Slot] = {}
        self._by_name: dict[str, _Slot] = {}
        self._building: list[type] = []

    def register(self, bean_class: type, name: str = "", instance: Any = None) -> str:
        """Register *bean_class*, optionally with a ready-made *instance*.

        Returns the bean name: *name*, else the class's ``@service(name=...)``,
        else the class name.
        """
        bean_name = name or getattr(bean_class, "__workshop_bean_name__", "") or bean_class.__name__
        slot = _Slot(bean_class, bean_name, instance)
        self._slots[bean_class] = slot
        self._by_name[bean_name] = slot
        return bean_name

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def resolve(self, bean_class: type[T]) -> T:
        slot = self._slots.get(bean_class)
        if slot is None:
            wanted = getattr(bean_class, "__name__", repr(bean_class))
            raise NoSuchBeanError(wanted, candidates=self._similar_class_names(wanted))
        return cast(T, self._instance_of(slot))

    def resolve_by_name(self, name: str) -> Any:
        slot = self._by_name.get(name)
        if slot is None:
            raise NoSuchBeanError(name, candidates=difflib.get_close_matches(name, list(self._by_name), n=3))
        return self._instance_of(slot)

    def replace(self, name: str, instance: Any) -> None:
        """Swap the instance held under *name*, e.g. for a post-processed bean."""
        self._by_name[name].instance = instance

    def _instance_of(self, slot: _Slot) -> Any:
        if slot.instance is None:
            slot.instance = self._build(slot.bean_class)
        return slot.instance

    def _build(self, bean_class: type) -> Any:
        if bean_class in self._building:
            raise BeanCurrentlyInCreationError([*self._building, bean_class])
        self._building.append(bean_class)
        try:
            return bean_class(**self._constructor_kwargs(bean_class))
        finally:
            self._building.pop()

    def _constructor_kwargs(self, bean_class: type) -> dict[str, Any]:
        init = bean_class.__init__  # type: ignore[misc]
        if init is object.__init__:
            return {}

        hints = typing.get_type_hints(init)
        kwargs: dict[str, Any] = {}
        for param in list(inspect.signature(init).parameters.values())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            has_default = param.default is not inspect.Parameter.empty
            wanted, nullable = _unwrap_optional(hints.get(param.name))
            lenient = has_default or nullable

            if wanted in self._slots and not (lenient and wanted in self._building):
                kwargs[param.name] = self.resolve(wanted)
            elif has_default:
                continue
            elif nullable:
                kwargs[param.name] = None
            else:
                wanted_name = getattr(wanted, "__name__", param.name)
                raise NoSuchBeanError(
                    wanted_name,
                    required_by=f"{bean_class.__qualname__}.__init__({param.name})",
                    candidates=self._similar_class_names(wanted_name),
                )
        return kwargs

    def _similar_class_names(self, name: str) -> list[str]:
        return difflib.get_close_matches(name, [cls.__name__ for cls in self._slots], n=3)


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """Split ``T | None`` into ``(T, True)``; anything else is ``(hint, False)``."""
    if typing.get_origin(hint) is Union or isinstance(hint, types.UnionType):
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1 and len(members) < len(typing.get_args(hint)):
            return members[0], True
    return hint, False
