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
"""Layered configuration for perf-workshop.

A key such as ``workshop.service.max_runs`` is looked up in these layers,
first hit wins:

1. explicit overrides, i.e. command-line flags (:meth:`Config.with_overrides`)
2. environment variables, ``WORKSHOP_SERVICE_MAX_RUNS``
3. the user's YAML file (``--config``)
4. the packaged ``workshop-defaults.yaml``
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar, get_args, get_type_hints

import yaml  # type: ignore[import-untyped]

from perfworkshop.kernel.exceptions import InvalidConfigurationException

T = TypeVar("T")

DEFAULTS_RESOURCE = "workshop-defaults.yaml"

_PREFIX_ATTR = "__workshop_config_prefix__"
_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable from the keys under *prefix*::

        @config_properties(prefix="workshop.service")
        @dataclass
        class ServiceProperties:
            max_runs: int = 300
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def env_var_for(key: str) -> str:
    """``workshop.service.max_runs`` -> ``WORKSHOP_SERVICE_MAX_RUNS``."""
    return "WORKSHOP_" + re.sub(r"[.-]", "_", key.removeprefix("workshop.")).upper()


class Config:
    """Dot-notation view over the configuration layers."""

    def __init__(self, data: dict[str, Any] | None = None, overrides: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._overrides: dict[str, Any] = dict(overrides or {})
        self.sources: list[str] = []

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Packaged defaults, with the YAML file at *path* merged on top."""
        defaults = importlib.resources.files("perfworkshop.resources").joinpath(DEFAULTS_RESOURCE)
        data = _read_yaml(defaults.read_text(), DEFAULTS_RESOURCE)
        sources = [DEFAULTS_RESOURCE]

        if path is not None:
            path = Path(path)
            if not path.is_file():
                raise InvalidConfigurationException(
                    f"configuration file not found: {path}",
                    code="CONFIG_FILE",
                    context={"path": str(path)},
                )
            data = _deep_merge(data, _read_yaml(path.read_text(), str(path)))
            sources.append(str(path))

        config = cls(data)
        config.sources = sources
        return config

    def with_overrides(self, overrides: Mapping[str, Any]) -> Config:
        """A copy in which *overrides* (dotted keys) win over every other layer."""
        config = Config(self._data, {**self._overrides, **overrides})
        config.sources = [*self.sources, "overrides"]
        return config

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._overrides:
            return self._overrides[key]

        from_env = os.environ.get(env_var_for(key))
        if from_env is not None:
            return from_env

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def get_section(self, prefix: str) -> dict[str, Any]:
        """The mapping stored under *prefix* in the file layers (empty if absent)."""
        node: Any = self._data
        for part in prefix.split("."):
            node = node.get(part) if isinstance(node, dict) else None
        return dict(node) if isinstance(node, dict) else {}

    def bind(self, properties_cls: type[T]) -> T:
        """Build a ``@config_properties`` dataclass from the keys under its prefix.

        Every field goes through :meth:`get`, so all layers apply; strings from
        the environment are converted to the field's declared scalar type.
        """
        prefix = getattr(properties_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise TypeError(f"{properties_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(properties_cls)
        values: dict[str, Any] = {}
        for field in dataclasses.fields(properties_cls):  # type: ignore[arg-type]
            key = f"{prefix}.{field.name}"
            raw = self.get(key)
            if raw is not None:
                values[field.name] = _coerce(key, raw, hints[field.name])
        return properties_cls(**values)


def _read_yaml(text: str, source: str) -> dict[str, Any]:
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"{source}: top level must be a mapping",
            code="CONFIG_FILE",
            context={"path": source},
        )
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = _deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _coerce(key: str, raw: Any, hint: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    target = next((arg for arg in get_args(hint) if arg is not type(None)), hint)
    if target is bool:
        return raw.strip().lower() in _TRUE_STRINGS
    if target in (int, float):
        try:
            return target(raw)
        except ValueError as exc:
            raise InvalidConfigurationException(
                f"{key} must be {target.__name__}, got {raw!r}",
                code="CONFIG_TYPE",
                context={"key": key, "value": raw},
            ) from exc
    return raw
