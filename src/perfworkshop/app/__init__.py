"""The workshop application: the awesome web service and its logging aspect."""

from perfworkshop.app.awesome_web_service import AwesomeWebService
from perfworkshop.app.logging_aspect import LoggingAspect
from perfworkshop.app.properties import ServiceProperties

__all__ = ["AwesomeWebService", "LoggingAspect", "ServiceProperties"]
