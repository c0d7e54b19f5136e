"""Stereotype marker for beans declared in the workshop context."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, overload

T = TypeVar("T", bound=type)


@overload
def service(cls: T) -> T: ...


@overload
def service(*, name: str = "") -> Callable[[T], T]: ...


def service(cls: T | None = None, *, name: str = "") -> T | Callable[[T], T]:
    """Mark a class as a service bean.

    Advice addresses the methods of a service as
    ``service.<ClassName>.<method>``. *name* becomes the bean's default name
    when the context resource does not give one.
    """

    def mark(target: T) -> T:
        target.__workshop_stereotype__ = "service"  # type: ignore[attr-defined]
        if name:
            target.__workshop_bean_name__ = name  # type: ignore[attr-defined]
        return target

    if cls is not None:
        return mark(cls)
    return mark
