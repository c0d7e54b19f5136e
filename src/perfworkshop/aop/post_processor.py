"""Aspect auto-proxying for the application context."""

from __future__ import annotations

from typing import Any

import structlog

from perfworkshop.aop.advice import is_aspect
from perfworkshop.aop.registry import AspectRegistry
from perfworkshop.aop.weaver import weave_bean

logger = structlog.get_logger("perfworkshop.aop")


def qualified_prefix(bean: Any) -> str:
    """``service.AwesomeWebService`` for a ``@service`` bean, else ``<module>.<Class>``."""
    cls = type(bean)
    owner = getattr(cls, "__workshop_stereotype__", None) or cls.__module__
    return f"{owner}.{cls.__name__}"


class AspectBeanPostProcessor:
    """Collects ``@aspect`` beans, then weaves their advice into every other bean.

    The context hands every bean to :meth:`before_init` before any bean reaches
    :meth:`after_init`, so the registry is complete by the time weaving starts.
    """

    def __init__(self) -> None:
        self.registry = AspectRegistry()

    def before_init(self, bean: Any, bean_name: str) -> Any:
        if is_aspect(bean):
            found = self.registry.register(bean)
            logger.debug("aspect_registered", bean=bean_name, advice=found)
        return bean

    def after_init(self, bean: Any, bean_name: str) -> Any:
        if is_aspect(bean) or len(self.registry) == 0:
            return bean
        woven = weave_bean(bean, qualified_prefix(bean), self.registry)
        if woven:
            logger.debug("bean_woven", bean=bean_name, methods=woven)
        return bean
