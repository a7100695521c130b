"""Output translators: native tool output to diagnostics.

Every translator has the signature
``(output, workspace_root, target_files, tests) -> RunOutcome``.
"""

from testplane.testing.parsers.deno import parse_deno_output
from testplane.testing.parsers.gotest import parse_go_test_json
from testplane.testing.parsers.jsonreport import parse_jest_json, parse_vitest_json
from testplane.testing.parsers.junit import (
    parse_node_test_junit,
    parse_phpunit_failure,
    parse_phpunit_junit,
)
from testplane.testing.parsers.libtest import parse_libtest_json
from testplane.testing.parsers.nextest import parse_nextest_output

__all__ = [
    "parse_libtest_json",
    "parse_nextest_output",
    "parse_go_test_json",
    "parse_jest_json",
    "parse_vitest_json",
    "parse_deno_output",
    "parse_phpunit_junit",
    "parse_phpunit_failure",
    "parse_node_test_junit",
]
