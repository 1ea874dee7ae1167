#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""``scanmock``: a scanimage stand-in answering ``-f`` and ``--help``.

argparse is deliberately not used here: its own ``--help`` handling and
exit status 2 would change the fixed output the callers parse.
"""

import sys

from ..lib._util.logging_utils import _log_debug
from ..lib.core.dispatcher import dispatch
from ..lib.core.errors import ScanMockError


def main() -> None:
    args = sys.argv[1:]
    try:
        text = dispatch(args)
    except ScanMockError as e:
        _log_debug(f"scanmock: {e} (exit {e.exit_code})")
        raise SystemExit(e.exit_code) from None

    _log_debug(f"scanmock: answered {args[0]!r}")
    sys.stdout.write(text)
    # Callers read the pipe synchronously; make sure it is out before exit.
    sys.stdout.flush()


if __name__ == "__main__":
    main()
