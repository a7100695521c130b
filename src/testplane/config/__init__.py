"""Config module exports."""

from testplane.config.loader import load_config
from testplane.config.models import (
    AdapterConfig,
    ExecutionConfig,
    LoggingConfig,
    LogOutputConfig,
    TestPlaneConfig,
)

__all__ = [
    "load_config",
    "TestPlaneConfig",
    "AdapterConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
