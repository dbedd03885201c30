from ulidkit.internal.logging import LogLevel, StructuredLogger, get_logger
from ulidkit.internal.health import HealthChecker, get_health_checker

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "HealthChecker",
    "get_health_checker",
]
