"""Logging setup: structlog with the workshop's console and json formats."""

from perfworkshop.logging.setup import configure_logging, render_console

__all__ = ["configure_logging", "render_console"]
