"""confinject Logging — logging port and structlog adapter."""

from confinject.logging.port import LoggingPort
from confinject.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
