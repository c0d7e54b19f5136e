"""Pointcut patterns over qualified method names.

A woven method is addressed as ``<stereotype-or-module>.<Class>.<method>``,
e.g. ``service.AwesomeWebService.magic_method``. In a pattern:

* ``*`` on its own is exactly one dot-separated segment,
* ``**`` on its own is one or more segments,
* ``*`` and ``?`` inside a segment are shell-style wildcards that never
  cross a dot (``get_*``).

>>> matches_pointcut("service.*.magic_method", "service.AwesomeWebService.magic_method")
True
>>> matches_pointcut("**.get_*", "perfworkshop.app.AwesomeWebService.get_awesome_data")
True
>>> matches_pointcut("*.magic_method", "service.AwesomeWebService.magic_method")
False
"""

from __future__ import annotations

import functools
import re

_SEGMENT_WILDCARDS = {"*": "[^.]*", "?": "[^.]"}


def matches_pointcut(pattern: str, qualified_name: str) -> bool:
    return compile_pointcut(pattern).fullmatch(qualified_name) is not None


@functools.lru_cache(maxsize=128)
def compile_pointcut(pattern: str) -> re.Pattern[str]:
    return re.compile(r"\.".join(_translate(segment) for segment in pattern.split(".")))


def _translate(segment: str) -> str:
    if segment == "**":
        return r"[^.]+(?:\.[^.]+)*"
    if segment == "*":
        return r"[^.]+"
    return "".join(_SEGMENT_WILDCARDS.get(ch) or re.escape(ch) for ch in segment)
