# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Global configuration for the inquiry side and the debug log.

The stub itself never reads any of this: its output and exit status depend
on ``argv`` alone.
"""

import os
import shlex
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root, state_root as _state_root_base

DEFAULT_SCANIMAGE_TIMEOUT = 30.0

# ---------- Global config ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If SCANMOCK_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (SCANMOCK_CONFIG_DIR or ~/.config/scanmock)
        2) sys.prefix/etc/scanmock/config.yml
        3) /etc/scanmock/config.yml
    """
    env_file = os.environ.get("SCANMOCK_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "scanmock" / "config.yml"
    etc_cfg = Path("/etc/scanmock/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    An explicit SCANMOCK_CONFIG_FILE is returned even if missing to make
    intent visible to the user. Otherwise the first existing candidate wins;
    if none exist, the last one (/etc/scanmock/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return data if isinstance(data, dict) else {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote
    ``scanimage: "oops"``), returns ``{}`` so callers can use ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Resolved settings ----------


def state_root() -> Path:
    """State directory, resolved to an absolute path."""
    return _state_root_base().resolve()


def debug_log_enabled() -> bool:
    """True when ``logging.debug`` is set in the global config."""
    try:
        return bool(get_global_section("logging").get("debug", False))
    except (OSError, yaml.YAMLError):
        return False


def default_scanimage_command() -> list[str]:
    """Run the bundled stub with the current interpreter."""
    return [sys.executable, "-m", "scanmock.cli"]


def _as_command(value: Any) -> list[str] | None:
    if isinstance(value, str) and value.strip():
        return shlex.split(value)
    if isinstance(value, list) and value:
        return [str(part) for part in value]
    return None


def get_scanimage_command() -> list[str]:
    """Command used to run scanimage.

    Order:
    - SCANMOCK_SCANIMAGE env (shell-split)
    - ``scanimage.command`` in the global config (string or list)
    - the bundled stub
    """
    env = _as_command(os.environ.get("SCANMOCK_SCANIMAGE", ""))
    if env:
        return env
    configured = _as_command(get_global_section("scanimage").get("command"))
    return configured or default_scanimage_command()


def get_scanimage_timeout() -> float:
    """Seconds to wait for one scanimage call (``scanimage.timeout``)."""
    raw = get_global_section("scanimage").get("timeout", DEFAULT_SCANIMAGE_TIMEOUT)
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_SCANIMAGE_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_SCANIMAGE_TIMEOUT
