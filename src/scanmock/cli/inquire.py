#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""``scanmock-inquire``: query a scanimage-compatible tool and show the results."""

import argparse
import json
import os
import shlex
from pathlib import Path

import argcomplete
import yaml
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..lib._util.ansi import gray as _gray, supports_color as _supports_color, yes_no as _yes_no
from ..lib.core.config import (
    debug_log_enabled as _debug_log_enabled,
    get_scanimage_command as _get_scanimage_command,
    get_scanimage_timeout as _get_scanimage_timeout,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    state_root as _state_root,
)
from ..lib.core.errors import ScanImageError
from ..lib.inquiry import Device, describe_scanners, inquire, list_devices


def _print_devices(devices: list[Device]) -> None:
    if not devices:
        print("No scanners found")
        return

    if not _supports_color():
        for d in devices:
            index = "" if d.index is None else d.index
            print(f"{d.device},{d.vendor},{d.type},{d.model},{index}")
        return

    table = Table(title="Scanners")
    for column in ("Device", "Vendor", "Type", "Model", "Index"):
        table.add_column(column)
    for d in devices:
        table.add_row(d.device, d.vendor, d.type, d.model, "" if d.index is None else str(d.index))
    Console().print(table)


def _print_config(command: list[str]) -> None:
    """Display configuration paths and the resolved scanimage command."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    paths = _global_config_search_paths()
    if paths:
        print("- Global config search order:")
        for p in paths:
            exists = Path(p).is_file()
            print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(exists, color_enabled)})")
    print(f"- scanimage command: {_gray(shlex.join(command), color_enabled)}")
    print(f"- scanimage timeout: {_get_scanimage_timeout()}s")

    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- State root: {_gray(str(sroot), color_enabled)} "
        f"(exists: {_yes_no(Path(sroot).is_dir(), color_enabled)})"
    )
    print(f"- Debug log: {_yes_no(_debug_log_enabled(), color_enabled)}")

    print("Environment overrides (if set):")
    for var in (
        "SCANMOCK_CONFIG_FILE",
        "SCANMOCK_CONFIG_DIR",
        "SCANMOCK_STATE_DIR",
        "SCANMOCK_SCANIMAGE",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scanmock-inquire",
        description="Ask a scanimage-compatible tool for its devices and options",
    )
    parser.add_argument("--version", action="version", version=f"scanmock-inquire {__version__}")
    parser.add_argument(
        "--command",
        help="scanimage command line to run (default: config or the bundled stub)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List scanners reported by -f")

    p_help = sub.add_parser("help", help="Show options parsed from --help")
    p_help.add_argument("-d", "--device", help="Device name to pass with -d")

    sub.add_parser("describe", help="Print the scanners JSON document")
    sub.add_parser("config", help="Show configuration paths and the scanimage command")
    return parser


def main() -> None:
    parser = build_parser()

    try:
        argcomplete.autocomplete(parser)
    except Exception:  # pragma: no cover - shell integration
        pass

    args = parser.parse_args()
    try:
        command = shlex.split(args.command) if args.command else _get_scanimage_command()
        _get_scanimage_timeout()
    except (OSError, yaml.YAMLError) as e:
        detail = " ".join(str(e).split())
        raise SystemExit(f"scanmock-inquire: bad config {_global_config_path()}: {detail}") from None

    try:
        if args.cmd == "list":
            _print_devices(list_devices(command=command))
        elif args.cmd == "help":
            caps = inquire(getattr(args, "device", None), command=command)
            print(json.dumps(caps.to_dict(), indent=2))
        elif args.cmd == "describe":
            print(json.dumps(describe_scanners(command=command), indent=4))
        elif args.cmd == "config":
            _print_config(command)
        else:
            parser.error("Unknown command")
    except ScanImageError as e:
        raise SystemExit(f"scanmock-inquire: {e}") from None


if __name__ == "__main__":
    main()
