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
"""LoggingAspect woven into AwesomeWebService — counter, markers, failure cleanup."""

from __future__ import annotations

import random

import pytest
from structlog.testing import capture_logs

from perfworkshop.aop.registry import AspectRegistry
from perfworkshop.aop.weaver import weave_bean
from perfworkshop.app.awesome_web_service import AwesomeWebService
from perfworkshop.app.logging_aspect import LoggingAspect
from perfworkshop.context.application_context import ApplicationContext
from perfworkshop.context.definitions import load_context
from perfworkshop.core.config import Config


def _woven_service(seed: int = 0, sleep=None) -> tuple[AwesomeWebService, LoggingAspect, list[float]]:
    pauses: list[float] = []
    svc = AwesomeWebService(rng=random.Random(seed), sleep=sleep or pauses.append)
    aspect = LoggingAspect()
    registry = AspectRegistry()
    registry.register(aspect)
    weave_bean(svc, "service.AwesomeWebService", registry)
    return svc, aspect, pauses


def _markers(logs: list[dict]) -> list[dict]:
    return [entry for entry in logs if entry["log_level"] == "info"]


class CountingProxy:
    def __init__(self, target: AwesomeWebService) -> None:
        self.target = target
        self.calls = 0

    def magic_method(self) -> None:
        self.calls += 1
        self.target.magic_method()


class TestCounter:
    def test_counter_starts_at_zero(self) -> None:
        assert LoggingAspect().counter == 0

    @pytest.mark.parametrize("seed", [2, 3, 17])
    def test_counter_matches_runs(self, seed: int) -> None:
        expected_runs = random.Random(seed).randrange(300)
        svc, aspect, pauses = _woven_service(seed)

        svc.get_awesome_data()

        assert aspect.counter == expected_runs
        assert len(pauses) == expected_runs

    def test_counter_is_cumulative_and_non_decreasing(self) -> None:
        svc, aspect, pauses = _woven_service(seed=4)

        svc.get_awesome_data()
        after_first = aspect.counter
        svc.get_awesome_data()
        after_second = aspect.counter

        assert 0 <= after_first <= after_second
        assert after_second == len(pauses)

    def test_direct_light_calls_are_counted(self) -> None:
        svc, aspect, _ = _woven_service()
        before = aspect.counter
        for _ in range(3):
            svc.magic_method()
        assert aspect.counter == before + 3


class TestMarkers:
    def test_logs_before_result_after_counter_in_order(self) -> None:
        svc, aspect, _ = _woven_service(seed=6)

        with capture_logs() as logs:
            result = svc.get_awesome_data()

        markers = _markers(logs)
        assert [entry["event"] for entry in markers] == ["before", "result", "after", "counter"]
        assert markers[1]["result"] == result
        assert markers[3]["counter"] == aspect.counter

    def test_after_logged_before_caller_sees_exception(self) -> None:
        def broken(_seconds: float) -> None:
            raise RuntimeError("pause failed")

        seed = next(s for s in range(100) if random.Random(s).randrange(300) > 0)
        svc, aspect, _ = _woven_service(seed=seed, sleep=broken)

        with capture_logs() as logs:
            with pytest.raises(RuntimeError, match="pause failed"):
                svc.get_awesome_data()
            events_when_raised = [entry["event"] for entry in _markers(logs)]

        assert events_when_raised == ["before", "after", "counter"]
        # Before advice ran for the single light call that failed.
        assert aspect.counter == 1


class TestProxySubstitution:
    def test_counting_proxy_sees_every_internal_call(self) -> None:
        seed = 12
        expected_runs = random.Random(seed).randrange(300)
        svc, aspect, _ = _woven_service(seed)
        proxy = CountingProxy(svc)
        svc.set_proxy(proxy)

        svc.get_awesome_data()

        assert proxy.calls == expected_runs
        assert aspect.counter == expected_runs


class TestThroughContext:
    def test_static_context_weaves_aspect(self) -> None:
        config = Config(
            {"workshop": {"service": {"max_runs": 20, "min_sleep_ms": 0, "max_sleep_ms": 1, "seed": 11}}}
        )
        ctx = ApplicationContext(config)
        load_context(ctx)
        ctx.start()

        svc = ctx.get_bean_by_name("awesomeWebService")
        aspect = ctx.get_bean_by_name("loggingAspect")
        expected_runs = random.Random(11).randrange(20)

        with capture_logs() as logs:
            svc.get_awesome_data()

        assert aspect.counter == expected_runs
        assert [entry["event"] for entry in _markers(logs)] == ["before", "result", "after", "counter"]
        ctx.stop()
