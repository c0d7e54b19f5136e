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
"""structlog over stdlib logging, configured from ``workshop.logging``.

The console format prints the workshop's markers the way they read on a
terminal: an event carrying a value under its own name renders as
``name = value`` (``result = 1838211593``, ``counter = 147``) and a bare
event as its name (``before``). Remaining keys follow as ``key=value``.
The json format emits the whole event dict, timestamp and logger included.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from perfworkshop.core.config import Config
from perfworkshop.kernel.exceptions import InvalidConfigurationException

FORMATS = ("console", "json")

_CONSOLE_DROPPED = ("timestamp", "logger")
_CONSOLE_FLAGGED_LEVELS = frozenset({"warning", "error", "critical"})


def render_console(_logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]) -> str:
    event = str(event_dict.pop("event", ""))
    level = event_dict.pop("level", "info")
    for key in _CONSOLE_DROPPED:
        event_dict.pop(key, None)

    line = f"{event} = {event_dict.pop(event)}" if event in event_dict else event
    if event_dict:
        line += " " + " ".join(f"{key}={value}" for key, value in event_dict.items())
    if level in _CONSOLE_FLAGGED_LEVELS:
        line = f"[{level}] {line}"
    return line


def configure_logging(config: Config) -> None:
    """Apply ``workshop.logging.format`` and ``workshop.logging.level.*``.

    ``level.root`` sets the root level; any other entry under ``level`` is a
    logger name, e.g. ``perfworkshop.aop: DEBUG``.
    """
    fmt = str(config.get("workshop.logging.format", "console")).lower()
    if fmt not in FORMATS:
        raise InvalidConfigurationException(
            f"workshop.logging.format must be one of {', '.join(FORMATS)}, got {fmt!r}",
            code="CONFIG_LOG_FORMAT",
            context={"format": fmt},
        )
    levels = {name: _level(value) for name, value in config.get_section("workshop.logging.level").items()}
    root_level = levels.pop("root", logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if fmt == "json" else render_console,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level, force=True)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def _level(name: Any) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise InvalidConfigurationException(
            f"unknown log level {name!r}",
            code="CONFIG_LOG_LEVEL",
            context={"level": name},
        )
    return level
