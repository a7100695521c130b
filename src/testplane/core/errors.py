"""TestPlane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test discovery and execution
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003

    # Test (7xxx)
    TEST_UNKNOWN_KIND = 7001
    TEST_FILE_UNREADABLE = 7002
    TEST_SPAWN_FAILED = 7003
    TEST_TOOL_FAILED = 7004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TestPlaneError(Exception):
    """Base error with structured context for adapter responses."""

    __test__ = False  # not a pytest test class

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TEST_SPAWN_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestPlaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )


class UnknownTestKindError(TestPlaneError):
    """Raised when a test kind string has no registered runner."""

    @classmethod
    def for_kind(cls, kind: str) -> "UnknownTestKindError":
        return cls(
            code=ErrorCode.TEST_UNKNOWN_KIND,
            message=f"Unknown test kind: {kind}",
            details={"kind": kind},
        )


class DiscoveryError(TestPlaneError):
    """Test discovery failed for a single file."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.TEST_FILE_UNREADABLE,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class RunnerError(TestPlaneError):
    """Native test tool could not be run or gave no usable output."""

    @classmethod
    def spawn_failed(cls, command: list[str], reason: str) -> "RunnerError":
        return cls(
            code=ErrorCode.TEST_SPAWN_FAILED,
            message=f"Failed to start {command[0] if command else '<empty>'}: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def tool_failed(cls, tool: str, stderr: str, exit_code: int | None = None) -> "RunnerError":
        return cls(
            code=ErrorCode.TEST_TOOL_FAILED,
            message=f"{tool} produced no output: {stderr.strip()[:500]}",
            retryable=True,
            details={"tool": tool, "exit_code": exit_code, "stderr": stderr},
        )


class InternalError(TestPlaneError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
