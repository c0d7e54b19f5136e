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
"""perf-workshop command: one call of the awesome web service, through its aspect."""

from __future__ import annotations

from pathlib import Path

import click

from perfworkshop.core.application import WorkshopApplication
from perfworkshop.kernel.exceptions import WorkshopException

SERVICE_BEAN = "awesomeWebService"


def run_once(config_path: Path | None = None, seed: int | None = None) -> int:
    """Start the context, call get_awesome_data once, stop the context.

    *seed* outranks both the config file and ``WORKSHOP_SERVICE_SEED``.
    """
    overrides = {"workshop.service.seed": seed} if seed is not None else None
    with WorkshopApplication(config_path, overrides=overrides) as app:
        return app.context.get_bean_by_name(SERVICE_BEAN).get_awesome_data()


@click.command()
@click.version_option(package_name="perf-workshop")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file merged over the packaged defaults.",
)
@click.option("--seed", type=int, default=None, help="Seed for the service's random source.")
def cli(config_path: Path | None, seed: int | None) -> None:
    """Call AwesomeWebService.get_awesome_data once and log its timing markers."""
    try:
        run_once(config_path, seed)
    except WorkshopException as exc:
        raise click.ClickException(str(exc)) from exc
