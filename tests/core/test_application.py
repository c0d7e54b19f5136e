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
"""Tests for WorkshopApplication."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from perfworkshop.app.awesome_web_service import AwesomeWebService
from perfworkshop.app.logging_aspect import LoggingAspect
from perfworkshop.container.exceptions import BeanDefinitionException
from perfworkshop.core.application import WorkshopApplication


class TestWorkshopApplication:
    def test_context_manager_starts_and_stops(self) -> None:
        with WorkshopApplication(configure_logs=False) as app:
            assert app.context.started
            assert isinstance(app.context.get_bean_by_name("awesomeWebService"), AwesomeWebService)
            assert isinstance(app.context.get_bean_by_name("loggingAspect"), LoggingAspect)
        assert not app.context.started

    def test_overrides_reach_service_properties(self) -> None:
        overrides = {"workshop.service.max_runs": 4, "workshop.service.seed": 9}
        with WorkshopApplication(overrides=overrides, configure_logs=False) as app:
            props = app.context.get_bean_by_name("awesomeWebService").properties
        assert (props.max_runs, props.seed) == (4, 9)

    def test_service_is_woven_at_startup(self) -> None:
        overrides = {"workshop.service.max_runs": 5, "workshop.service.max_sleep_ms": 5, "workshop.service.seed": 1}
        with WorkshopApplication(overrides=overrides, configure_logs=False) as app:
            app.context.get_bean_by_name("awesomeWebService").get_awesome_data()
            counter = app.context.get_bean_by_name("loggingAspect").counter
        assert counter == random.Random(1).randrange(5)

    def test_context_resource_from_config(self, tmp_path: Path) -> None:
        resource = tmp_path / "only-service.yaml"
        resource.write_text("beans:\n  - class: perfworkshop.app.awesome_web_service.AwesomeWebService\n")

        app = WorkshopApplication(overrides={"workshop.context.resource": str(resource)}, configure_logs=False)
        assert app.definition.aspect_autoproxy is False
        assert [b.name for b in app.definition.beans] == ["awesomeWebService"]

    def test_unknown_context_resource(self) -> None:
        with pytest.raises(BeanDefinitionException, match="context resource not found"):
            WorkshopApplication(overrides={"workshop.context.resource": "nope.yaml"}, configure_logs=False)
