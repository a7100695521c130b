"""Core module exports."""

from testplane.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    InternalError,
    RunnerError,
    TestPlaneError,
    UnknownTestKindError,
)
from testplane.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ErrorCode",
    "TestPlaneError",
    "ConfigError",
    "DiscoveryError",
    "RunnerError",
    "UnknownTestKindError",
    "InternalError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
