# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Run a scanimage-compatible command and parse what it reports.

This is the consumer side of the stub: ``-f FORMAT`` gives one line per
device, ``--help`` gives the option section describing resolutions, modes
and scan area. Real ``scanimage`` output can be fed through the same parsers.
"""

import re
import shlex
import socket
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ._util.logging_utils import _log_debug
from .core.config import get_scanimage_command, get_scanimage_timeout
from .core.errors import ScanImageError

# Field order matches the stub's device line.
# scanimage adds no line break between devices unless the format ends in %n.
DEVICE_LIST_FORMAT = "scanner,%d,%v,%t,%m,%i%n"
DEVICE_LINE_PREFIX = "scanner"

STANDARD_RESOLUTIONS = (75, 100, 150, 200, 240, 250, 300, 600)

PIXEL_FORMATS = {
    "Lineart": "bw1",
    "Gray": "gray8",
    "Color": "rgb24",
}

DEFAULT_SOURCES = ["any", "feeder"]
DEFAULT_NUMBER_OF_SHEETS = [1, 32767]
NO_SERIAL_NUMBER = "(no serial number)"
DEFAULT_CROPPING = ["fixed"]
DEFAULT_COMPRESSION = ["none"]

_RESOLUTION_PREFIX = "    --resolution "
_MODE_MARKER = "    --mode "
_BRACKET_RX = re.compile(r"\[([^\]]*)\]")
_DPI_RANGE_RX = re.compile(r"(\d+)\.\.(\d+)\s*dpi")
_MM_RANGE_RX = re.compile(r"^\s+-[xy]\s+(\d+(?:\.\d+)?)\.\.(\d+(?:\.\d+)?)mm")
_SPLIT_RX = re.compile(r"[ \t|]")
_ENUM_VALUE_RX = re.compile(r"(?<![\w.])(\d+)(?:dpi)?(?![\w.])")


@dataclass(frozen=True)
class Device:
    """One ``scanner,...`` line of the device list."""

    device: str
    vendor: str = ""
    type: str = ""
    model: str = ""
    index: int | None = None


@dataclass
class Capabilities:
    """Option ranges parsed from ``--help`` output."""

    resolutions: list[int] = field(default_factory=list)
    default_resolution: int | None = None
    modes: list[str] = field(default_factory=list)
    default_mode: str | None = None
    x_range: tuple[float, float] | None = None
    x_default: float | None = None
    y_range: tuple[float, float] | None = None
    y_default: float | None = None

    @property
    def pixel_formats(self) -> list[str]:
        """TWAIN Direct pixel formats for the known modes, in help order."""
        return [PIXEL_FORMATS[m] for m in self.modes if m in PIXEL_FORMATS]

    def to_dict(self) -> dict[str, Any]:
        return {
            "resolution": {"values": self.resolutions, "default": self.default_resolution},
            "mode": {"values": self.modes, "default": self.default_mode},
            "pixelFormat": self.pixel_formats,
            "x": {"range": list(self.x_range) if self.x_range else None, "default": self.x_default},
            "y": {"range": list(self.y_range) if self.y_range else None, "default": self.y_default},
        }


# ---------- Running scanimage ----------


def run_scanimage(
    reason: str,
    args: Sequence[str],
    command: Sequence[str] | None = None,
    timeout: float | None = None,
) -> list[str]:
    """Run scanimage with *args* and return its stdout as lines.

    *reason* only labels the call in the debug log and in errors. The
    command defaults to :func:`get_scanimage_command`.

    Raises:
        ScanImageError: the command is missing, timed out or exited nonzero.
    """
    cmd = list(command) if command else get_scanimage_command()
    argv = [*cmd, *args]
    _log_debug(f"scanimage>>> {reason}")
    _log_debug(f"scanimage>>> {shlex.join(argv)}")

    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout if timeout is not None else get_scanimage_timeout(),
            check=False,
        )
    except FileNotFoundError as e:
        raise ScanImageError(reason, f"command not found: {cmd[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise ScanImageError(reason, f"timed out after {e.timeout}s") from e
    except OSError as e:
        raise ScanImageError(reason, f"could not run {cmd[0]}: {e}") from e

    _log_debug(f"scanimage>>> {result.stdout or result.stderr or '(no data)'}")
    if result.returncode != 0:
        raise ScanImageError(
            reason,
            f"exited with status {result.returncode}",
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return result.stdout.splitlines()


# ---------- Device list ----------


def parse_device_line(line: str) -> Device | None:
    """Parse one device line, or return None if it is not one."""
    line = line.rstrip("\r\n")
    if not line.startswith(DEVICE_LINE_PREFIX):
        return None
    fields = line.split(",")
    if len(fields) < 2 or not fields[1]:
        return None

    def _get(i: int) -> str:
        return fields[i] if len(fields) > i else ""

    index = _get(5).strip()
    return Device(
        device=fields[1],
        vendor=_get(2),
        type=_get(3),
        model=_get(4),
        index=int(index) if index.isdigit() else None,
    )


def list_devices(command: Sequence[str] | None = None) -> list[Device]:
    """Ask scanimage for its devices; an unexpected reply means none."""
    lines = run_scanimage("ScannerList", ["-f", DEVICE_LIST_FORMAT], command=command)
    if not lines or not lines[0].startswith(DEVICE_LINE_PREFIX):
        _log_debug("No scanners found...")
        return []
    return [d for d in (parse_device_line(line) for line in lines) if d is not None]


# ---------- Help / capabilities ----------


def _bracket_default(line: str) -> str | None:
    m = _BRACKET_RX.search(line)
    return m.group(1) if m else None


def _parse_resolutions(line: str) -> list[int]:
    if "|" in line:
        # The last value carries the unit: 75|150|300dpi
        values = line.split("[", 1)[0]
        return [int(v) for v in _ENUM_VALUE_RX.findall(values)]
    m = _DPI_RANGE_RX.search(line)
    if m:
        low, high = int(m.group(1)), int(m.group(2))
        return [r for r in STANDARD_RESOLUTIONS if low <= r <= high]
    return []


def _parse_modes(line: str) -> list[str]:
    tokens = [tok for tok in _SPLIT_RX.split(line) if tok]
    return [tok for tok in tokens if not tok.startswith(("-", "["))]


def _parse_mm_range(line: str) -> tuple[tuple[float, float], float | None] | None:
    m = _MM_RANGE_RX.match(line)
    if not m:
        return None
    default = _bracket_default(line[m.end():])
    try:
        default_mm = float(default) if default is not None else None
    except ValueError:
        default_mm = None
    return (float(m.group(1)), float(m.group(2))), default_mm


def parse_help(lines: Iterable[str]) -> Capabilities:
    """Parse the option section of ``scanimage --help``.

    The first parseable line for each option wins; lines that do not parse
    are skipped.
    """
    caps = Capabilities()
    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith(_RESOLUTION_PREFIX) and not caps.resolutions:
            values = _parse_resolutions(line)
            if not values:
                _log_debug(f"skipping resolution line: {line!r}")
                continue
            caps.resolutions = values
            default = _bracket_default(line)
            caps.default_resolution = int(default) if default and default.isdigit() else None
        elif _MODE_MARKER in line and not caps.modes:
            modes = _parse_modes(line)
            if not modes:
                continue
            caps.modes = modes
            caps.default_mode = _bracket_default(line)
        elif line.startswith("    -x ") and caps.x_range is None:
            parsed = _parse_mm_range(line)
            if parsed is not None:
                caps.x_range, caps.x_default = parsed
        elif line.startswith("    -y ") and caps.y_range is None:
            parsed = _parse_mm_range(line)
            if parsed is not None:
                caps.y_range, caps.y_default = parsed
    return caps


def inquire(device: str | None = None, command: Sequence[str] | None = None) -> Capabilities:
    """Run ``--help`` (for *device* when given) and parse the reply."""
    args = ["--help"]
    if device:
        args += ["-d", device]
    return parse_help(run_scanimage("ScannerHelp", args, command=command))


# ---------- Scanner description ----------


def _micrometres(mm_range: tuple[float, float]) -> list[int]:
    return [round(mm_range[0] * 1000), round(mm_range[1] * 1000)]


def _offset_range(mm_range: tuple[float, float]) -> list[int]:
    return [0, int((mm_range[1] - mm_range[0]) * 1000)]


def describe_scanners(command: Sequence[str] | None = None) -> dict[str, Any]:
    """Build the ``{"scanners": [...]}`` document for every usable device.

    Devices whose help text has no width or height range are left out.
    """
    scanners: list[dict[str, Any]] = []
    for dev in list_devices(command=command):
        caps = inquire(dev.device, command=command)
        if caps.y_range is None or caps.x_range is None:
            _log_debug(f"skipping {dev.device}: no scan area in help output")
            continue

        entry: dict[str, Any] = {"sane": dev.device}
        try:
            entry["hostName"] = socket.gethostname()
        except OSError as e:
            _log_debug(f"Failed to get hostName: {e}")
        entry["serialNumber"] = NO_SERIAL_NUMBER
        entry["source"] = list(DEFAULT_SOURCES)
        entry["numberOfSheets"] = list(DEFAULT_NUMBER_OF_SHEETS)
        entry["resolution"] = list(caps.resolutions)
        entry["height"] = _micrometres(caps.y_range)
        entry["width"] = _micrometres(caps.x_range)
        entry["offsetX"] = _offset_range(caps.x_range)
        entry["offsetY"] = _offset_range(caps.y_range)
        entry["cropping"] = list(DEFAULT_CROPPING)
        entry["pixelFormat"] = caps.pixel_formats
        entry["compression"] = list(DEFAULT_COMPRESSION)
        scanners.append(entry)
    return {"scanners": scanners}
