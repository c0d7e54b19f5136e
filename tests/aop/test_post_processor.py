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
"""Tests for AspectBeanPostProcessor."""

from __future__ import annotations

from typing import Any

from perfworkshop.aop.advice import JoinPoint, around, aspect, before
from perfworkshop.aop.post_processor import AspectBeanPostProcessor, qualified_prefix
from perfworkshop.container.stereotypes import service


@service
class Greeter:
    def greet(self, name: str) -> str:
        return f"hello {name}"


class Plain:
    def greet(self, name: str) -> str:
        return f"hi {name}"


@aspect
class Shouting:
    def __init__(self) -> None:
        self.seen: list[str] = []

    @around("service.Greeter.greet")
    def shout(self, jp: JoinPoint) -> Any:
        return jp.proceed().upper()

    @before("service.Shouting.*")
    def never(self, jp: JoinPoint) -> None:
        self.seen.append(jp.method_name)


class TestQualifiedPrefix:
    def test_service_uses_stereotype(self) -> None:
        assert qualified_prefix(Greeter()) == "service.Greeter"

    def test_other_classes_use_module(self) -> None:
        assert qualified_prefix(Plain()) == f"{Plain.__module__}.Plain"


class TestWeaving:
    def test_weaves_after_collecting_aspects(self) -> None:
        processor = AspectBeanPostProcessor()
        greeter, shouting = Greeter(), Shouting()

        for name, bean in (("greeter", greeter), ("shouting", shouting)):
            processor.before_init(bean, name)
        for name, bean in (("greeter", greeter), ("shouting", shouting)):
            processor.after_init(bean, name)

        assert greeter.greet("bob") == "HELLO BOB"

    def test_aspects_are_not_woven(self) -> None:
        processor = AspectBeanPostProcessor()
        shouting = Shouting()
        processor.before_init(shouting, "shouting")
        processor.after_init(shouting, "shouting")

        assert "shout" not in vars(shouting)
        assert "never" not in vars(shouting)

    def test_nothing_woven_without_aspects(self) -> None:
        processor = AspectBeanPostProcessor()
        greeter = Greeter()
        assert processor.before_init(greeter, "greeter") is greeter
        assert processor.after_init(greeter, "greeter") is greeter
        assert "greet" not in vars(greeter)

    def test_unmatched_bean_untouched(self) -> None:
        processor = AspectBeanPostProcessor()
        processor.before_init(Shouting(), "shouting")
        plain = Plain()
        processor.after_init(plain, "plain")
        assert plain.greet("bob") == "hi bob"
        assert len(processor.registry) == 2
