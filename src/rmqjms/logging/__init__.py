"""rmqjms Logging — logging port and structlog adapter."""

from rmqjms.logging.port import LoggingPort
from rmqjms.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
