# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the scanmock log.

    Writes timestamped lines to ``state_root()/scanmock.log`` when
    ``logging.debug`` is enabled in the global config. Fully exception-safe:
    any IO or config error is silently ignored so this function never raises
    or affects callers (the stub's output must not change).
    """
    try:
        import time

        from ..core.config import debug_log_enabled
        from ..core.paths import state_root

        if not debug_log_enabled():
            return
        log_path = state_root() / "scanmock.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
