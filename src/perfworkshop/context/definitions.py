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
"""Static bean definitions — builds an ApplicationContext from a YAML resource.

The resource lists the beans to register and whether aspects are woven::

    aspect-autoproxy: true
    beans:
      - name: awesomeWebService
        class: perfworkshop.app.awesome_web_service.AwesomeWebService
"""

from __future__ import annotations

import importlib
import importlib.resources
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from perfworkshop.aop.post_processor import AspectBeanPostProcessor
from perfworkshop.container.exceptions import BeanDefinitionException
from perfworkshop.context.application_context import ApplicationContext

logger = structlog.get_logger("perfworkshop.context")

DEFAULT_CONTEXT_RESOURCE = "context.yaml"


@dataclass(frozen=True)
class BeanDefinition:
    """One entry of the ``beans`` list."""

    name: str
    class_path: str
    bean_class: type


@dataclass(frozen=True)
class ContextDefinition:
    """Parsed context resource."""

    source: str
    aspect_autoproxy: bool
    beans: tuple[BeanDefinition, ...]


def read_context_resource(resource: str | Path = DEFAULT_CONTEXT_RESOURCE) -> tuple[str, Any]:
    """Read raw YAML from a filesystem path, or from perfworkshop.resources by name."""
    path = Path(resource)
    if path.is_file():
        with open(path) as f:
            return str(path), yaml.safe_load(f)

    resource_file = importlib.resources.files("perfworkshop.resources").joinpath(str(resource))
    if not resource_file.is_file():
        raise BeanDefinitionException(resource=str(resource), reason="context resource not found")
    return str(resource), yaml.safe_load(resource_file.read_text())


def parse_context(source: str, data: Any) -> ContextDefinition:
    """Validate raw YAML data and import every bean class it names."""
    if not isinstance(data, dict):
        raise BeanDefinitionException(resource=source, reason="top level must be a mapping")

    raw_beans = data.get("beans") or []
    if not isinstance(raw_beans, list):
        raise BeanDefinitionException(resource=source, reason="'beans' must be a list")

    beans: list[BeanDefinition] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw_beans):
        if not isinstance(entry, dict) or not entry.get("class"):
            raise BeanDefinitionException(
                resource=source,
                reason=f"bean #{index} must be a mapping with a 'class' key",
            )
        class_path = str(entry["class"])
        bean_class = _import_class(source, class_path)
        name = str(entry.get("name") or _default_bean_name(bean_class))
        if name in seen:
            raise BeanDefinitionException(resource=source, reason=f"duplicate bean name '{name}'")
        seen.add(name)
        beans.append(BeanDefinition(name=name, class_path=class_path, bean_class=bean_class))

    return ContextDefinition(
        source=source,
        aspect_autoproxy=bool(data.get("aspect-autoproxy", False)),
        beans=tuple(beans),
    )


def load_context(
    context: ApplicationContext,
    resource: str | Path = DEFAULT_CONTEXT_RESOURCE,
) -> ContextDefinition:
    """Register the beans described by *resource* into *context*.

    When ``aspect-autoproxy`` is on, an :class:`AspectBeanPostProcessor` is
    registered so @aspect beans are woven into the others at startup.
    """
    source, data = read_context_resource(resource)
    definition = parse_context(source, data)

    for bean in definition.beans:
        context.register_bean(bean.bean_class, name=bean.name)

    if definition.aspect_autoproxy:
        context.register_post_processor(AspectBeanPostProcessor())

    logger.debug(
        "context_definitions_loaded",
        source=source,
        beans=[b.name for b in definition.beans],
        aspect_autoproxy=definition.aspect_autoproxy,
    )
    return definition


def _import_class(source: str, class_path: str) -> type:
    module_name, _, class_name = class_path.rpartition(".")
    if not module_name:
        raise BeanDefinitionException(resource=source, reason=f"'{class_path}' is not a dotted class path")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise BeanDefinitionException(resource=source, reason=f"cannot import '{module_name}': {exc}") from exc
    cls = getattr(module, class_name, None)
    if not isinstance(cls, type):
        raise BeanDefinitionException(resource=source, reason=f"'{class_path}' is not a class")
    return cls


def _default_bean_name(cls: type) -> str:
    """AwesomeWebService -> awesomeWebService."""
    return cls.__name__[:1].lower() + cls.__name__[1:]
