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
"""WorkshopApplication: configuration, logging, and the static context for one run."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from perfworkshop.container.exceptions import BeanCreationException
from perfworkshop.context.application_context import ApplicationContext
from perfworkshop.context.definitions import DEFAULT_CONTEXT_RESOURCE, load_context
from perfworkshop.core.config import Config
from perfworkshop.logging.setup import configure_logging

logger = structlog.get_logger("perfworkshop.core")


class WorkshopApplication:
    """Loads configuration, sets up logging, and registers the context's beans.

    Nothing is built until :meth:`startup`. Used as a context manager the
    application starts on entry and stops on exit::

        with WorkshopApplication(overrides={"workshop.service.seed": 7}) as app:
            app.context.get_bean_by_name("awesomeWebService").get_awesome_data()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        overrides: Mapping[str, Any] | None = None,
        configure_logs: bool = True,
    ) -> None:
        config = Config.load(config_path)
        self.config = config.with_overrides(overrides) if overrides else config
        if configure_logs:
            configure_logging(self.config)

        self.context = ApplicationContext(self.config)
        resource = self.config.get("workshop.context.resource", DEFAULT_CONTEXT_RESOURCE)
        self.definition = load_context(self.context, resource)

    def startup(self) -> None:
        logger.debug("config_loaded", sources=self.config.sources)
        try:
            self.context.start()
        except BeanCreationException as exc:
            logger.error("startup_failed", subsystem=exc.subsystem, provider=exc.provider, reason=exc.reason)
            raise
        logger.debug("application_started", context=self.definition.source)

    def shutdown(self) -> None:
        self.context.stop()
        logger.debug("application_stopped")

    def __enter__(self) -> WorkshopApplication:
        self.startup()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
