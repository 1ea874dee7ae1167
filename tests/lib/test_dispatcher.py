import unittest

from scanmock.lib.core.dispatcher import BRANCH_HELP, BRANCH_LIST, dispatch, select_branch
from scanmock.lib.core.errors import (
    EXIT_FAILURE,
    ScanMockError,
    UnrecognizedArgument,
    UsageError,
)
from scanmock.lib.core.responses import DEVICE_LIST, USAGE_BLOCK


class SelectBranchTests(unittest.TestCase):
    def test_empty_args_raise_usage_error(self) -> None:
        with self.assertRaises(UsageError) as ctx:
            select_branch([])
        self.assertEqual(ctx.exception.exit_code, EXIT_FAILURE)
        self.assertEqual(EXIT_FAILURE, -1)

    def test_prefix_and_substring(self) -> None:
        self.assertEqual(select_branch(["-f"]), BRANCH_LIST)
        self.assertEqual(select_branch(["-foo"]), BRANCH_LIST)
        self.assertEqual(select_branch(["--help"]), BRANCH_HELP)
        self.assertEqual(select_branch(["-x--help-y"]), BRANCH_HELP)

    def test_list_check_runs_first(self) -> None:
        self.assertEqual(select_branch(["-f--help"]), BRANCH_LIST)

    def test_help_must_be_in_first_argument(self) -> None:
        with self.assertRaises(UnrecognizedArgument):
            select_branch(["--mode", "--help"])

    def test_unrecognized_keeps_argument(self) -> None:
        with self.assertRaises(UnrecognizedArgument) as ctx:
            select_branch(["--resolution", "300"])
        self.assertEqual(ctx.exception.argument, "--resolution")
        self.assertIsInstance(ctx.exception, ScanMockError)
        self.assertEqual(ctx.exception.exit_code, -1)

    def test_prefix_is_case_sensitive(self) -> None:
        with self.assertRaises(UnrecognizedArgument):
            select_branch(["-F"])
        with self.assertRaises(UnrecognizedArgument):
            select_branch(["--HELP"])


class DispatchTests(unittest.TestCase):
    def test_dispatch_returns_fixed_text(self) -> None:
        self.assertEqual(dispatch(["-f"]), DEVICE_LIST)
        self.assertEqual(dispatch(("--help",)), USAGE_BLOCK)

    def test_dispatch_propagates_errors(self) -> None:
        with self.assertRaises(UsageError):
            dispatch([])
        with self.assertRaises(UnrecognizedArgument):
            dispatch(["foo"])

    def test_usage_block_lists_four_options(self) -> None:
        lines = USAGE_BLOCK.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("    --resolution "))
        self.assertTrue(lines[1].startswith("    --mode "))
        self.assertTrue(lines[2].startswith("    -x "))
        self.assertTrue(lines[3].startswith("    -y "))
        self.assertTrue(USAGE_BLOCK.endswith("\n"))
