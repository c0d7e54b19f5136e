"""Allow ``python -m perfworkshop``."""

from perfworkshop.cli import cli

cli()
