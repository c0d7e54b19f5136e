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
"""Tests for the pointcut expression matcher."""

from __future__ import annotations

import pytest

from perfworkshop.aop.pointcut import matches_pointcut


class TestMatchesPointcut:
    """matches_pointcut covers exact, single-star, double-star, and partial globs."""

    def test_exact_match(self) -> None:
        assert matches_pointcut(
            "service.AwesomeWebService.get_awesome_data",
            "service.AwesomeWebService.get_awesome_data",
        )

    def test_exact_match_rejects_other_method(self) -> None:
        assert not matches_pointcut(
            "service.AwesomeWebService.get_awesome_data",
            "service.AwesomeWebService.magic_method",
        )

    def test_star_matches_single_segment(self) -> None:
        assert matches_pointcut("service.*.magic_method", "service.AwesomeWebService.magic_method")

    def test_star_does_not_cross_dots(self) -> None:
        assert not matches_pointcut("*.magic_method", "service.AwesomeWebService.magic_method")

    def test_double_star_crosses_dots(self) -> None:
        assert matches_pointcut("**.magic_method", "a.b.c.AwesomeWebService.magic_method")

    @pytest.mark.parametrize(
        ("pattern", "name", "expected"),
        [
            ("service.*WebService.*", "service.AwesomeWebService.magic_method", True),
            ("service.AwesomeWebService.get_*", "service.AwesomeWebService.get_awesome_data", True),
            ("service.AwesomeWebService.get_*", "service.AwesomeWebService.set_proxy", False),
            ("service.AwesomeWebService.?et_proxy", "service.AwesomeWebService.set_proxy", True),
        ],
    )
    def test_partial_globs(self, pattern: str, name: str, expected: bool) -> None:
        assert matches_pointcut(pattern, name) is expected

    def test_regex_metacharacters_are_literal(self) -> None:
        assert not matches_pointcut("service.A+.run", "service.AAA.run")
