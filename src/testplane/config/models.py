"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTPLANE__SECTION__KEY)
3. Repo YAML (.testplane/config.yaml)
4. Global YAML (~/.config/testplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TESTPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    TESTPLANE__LOGGING__LEVEL=DEBUG
    TESTPLANE__EXECUTION__CACHE_DIR=/var/tmp/testplane
"""

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from testplane.testing.models import TestKind

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every skipped output line.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class AdapterConfig(BaseModel):
    """Which test framework to drive and which files belong to it.

    Configured in YAML under ``adapters.<id>``:

        adapters:
          rust:
            test_kind: cargo-nextest
            include: ["**/*.rs"]
            exclude: ["**/target/**"]
    """

    test_kind: str = Field(
        description="Test kind key (cargo-test, cargo-nextest, jest, vitest, deno, "
        "go-test, phpunit, node-test).",
    )
    extra_args: list[str] = Field(
        default_factory=list,
        description="Extra arguments forwarded verbatim to the native test tool.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for the native test tool.",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns selecting test files, relative to the repo root.",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns removed from the include set.",
    )
    workspace_dir: str | None = Field(
        default=None,
        description="Run every file from this directory instead of detected roots.",
    )

    def validation_warnings(self, adapter_id: str) -> list[str]:
        """Return human-readable problems that do not prevent loading."""
        warnings: list[str] = []
        if self.test_kind not in TestKind.values():
            warnings.append(
                f"Adapter '{adapter_id}': unknown test kind '{self.test_kind}'. "
                f"Supported: {', '.join(TestKind.values())}"
            )
        if not self.include:
            warnings.append(
                f"Adapter '{adapter_id}': no include patterns, every file with a "
                "matching extension is tested."
            )
        return warnings


class ExecutionConfig(BaseModel):
    """Native tool execution configuration.

    Env vars:
        TESTPLANE__EXECUTION__CACHE_DIR: Directory for report files and result logs
        TESTPLANE__EXECUTION__WRITE_RESULT_LOGS: Persist raw tool output for debugging
    """

    cache_dir: str = Field(
        default_factory=lambda: str(Path(tempfile.gettempdir()) / "testplane"),
        description="Directory for JSON/XML report files and raw output logs.",
    )
    write_result_logs: bool = Field(
        default=True,
        description="Persist raw stdout/stderr per framework. Best effort.",
    )
    max_output_chars: int = Field(
        default=16_000_000,
        description="Captured output beyond this size is truncated before parsing.",
    )

    @field_validator("max_output_chars")
    @classmethod
    def validate_max_output(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_output_chars must be positive, got {v}")
        return v


class TestPlaneConfig(BaseModel):
    """Root configuration for TestPlane.

    All settings can be configured via:
    1. Environment variables: TESTPLANE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    __test__ = False

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    adapters: dict[str, AdapterConfig] = Field(
        default_factory=dict,
        description="Adapters keyed by id. Empty means auto-detect from project markers.",
    )
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
