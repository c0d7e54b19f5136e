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
"""ApplicationContext: the beans of one workshop run, built and post-processed."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from perfworkshop.container.container import Container
from perfworkshop.container.exceptions import BeanCreationException
from perfworkshop.core.config import Config

logger = structlog.get_logger("perfworkshop.context")


class BeanPostProcessor(Protocol):
    """Sees every bean once the context has built it; may return a replacement."""

    def before_init(self, bean: Any, bean_name: str) -> Any: ...

    def after_init(self, bean: Any, bean_name: str) -> Any: ...


class ApplicationContext:
    """Registers beans, then builds them all when started.

    :meth:`start` builds every registered bean, passes each one to every
    post-processor's ``before_init``, and only then to every ``after_init``.
    An aspect listed after the service it advises is therefore registered
    before the service is woven. The ``Config`` the context was created with
    is itself a bean, so constructors can ask for it.
    """

    def __init__(self, config: Config) -> None:
        self._container = Container()
        self._container.register(Config, instance=config)
        self._bean_names: list[str] = []
        self._processors: list[BeanPostProcessor] = []
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def register_bean(self, bean_class: type, name: str = "") -> str:
        """Register *bean_class* and return the name it is known by."""
        bean_name = self._container.register(bean_class, name=name)
        if bean_name not in self._bean_names:
            self._bean_names.append(bean_name)
        return bean_name

    def register_post_processor(self, processor: BeanPostProcessor) -> None:
        self._processors.append(processor)

    def get_bean_by_name(self, name: str) -> Any:
        return self._container.resolve_by_name(name)

    def start(self) -> None:
        """Build and post-process every bean.

        Failures surface as :class:`BeanCreationException`; anything else a
        constructor raises is wrapped with subsystem ``startup``.
        """
        try:
            beans = {name: self._container.resolve_by_name(name) for name in self._bean_names}
            for stage in ("before_init", "after_init"):
                for name in beans:
                    for processor in self._processors:
                        beans[name] = getattr(processor, stage)(beans[name], name)
        except BeanCreationException:
            raise
        except Exception as exc:
            raise BeanCreationException("startup", type(exc).__name__, str(exc)) from exc

        for name, bean in beans.items():
            self._container.replace(name, bean)
        self._started = True
        logger.debug("context_started", beans=list(beans), post_processors=len(self._processors))

    def stop(self) -> None:
        self._started = False
        logger.debug("context_stopped")
