# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""One-shot command dispatch for the scanimage stub.

Only the first argument is inspected:

- it starts with ``-f``            -> device list
- it contains ``--help`` anywhere  -> usage block
- anything else, or no argument    -> error, no output

The ``-f`` check runs first, so ``-f--help`` lists devices.
"""

from collections.abc import Sequence

from .errors import UnrecognizedArgument, UsageError
from .responses import DEVICE_LIST, HELP_MARKER, LIST_DEVICES_PREFIX, USAGE_BLOCK

BRANCH_LIST = "list"
BRANCH_HELP = "help"


def select_branch(args: Sequence[str]) -> str:
    """Return ``"list"`` or ``"help"`` for *args* (``argv[1:]``).

    Raises:
        UsageError: *args* is empty.
        UnrecognizedArgument: ``args[0]`` matches neither pattern.
    """
    if not args:
        raise UsageError()

    first = args[0]
    if first.startswith(LIST_DEVICES_PREFIX):
        return BRANCH_LIST
    if HELP_MARKER in first:
        return BRANCH_HELP
    raise UnrecognizedArgument(first)


def dispatch(args: Sequence[str]) -> str:
    """Return the fixed text the stub prints for *args*."""
    branch = select_branch(args)
    return DEVICE_LIST if branch == BRANCH_LIST else USAGE_BLOCK
