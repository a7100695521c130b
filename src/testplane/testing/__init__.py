"""Test discovery, execution and result translation.

Only the data models are re-exported here; runners and the service import
configuration, which itself depends on these models.
"""

from testplane.testing.models import (
    Diagnostic,
    DiscoveredFile,
    Position,
    Range,
    RelatedLocation,
    RunOutcome,
    Severity,
    TestItem,
    TestKind,
    WorkspaceMap,
)

__all__ = [
    "Diagnostic",
    "DiscoveredFile",
    "Position",
    "Range",
    "RelatedLocation",
    "RunOutcome",
    "Severity",
    "TestItem",
    "TestKind",
    "WorkspaceMap",
]
