# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Error classes shared by the stub and the inquiry helpers."""

# Matches the stub's ``return (-1)``; the OS reports it as 255.
EXIT_FAILURE = -1


class ScanMockError(Exception):
    """Base class; ``exit_code`` is the process status the CLI exits with."""

    def __init__(self, message: str = "", exit_code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class UsageError(ScanMockError):
    """Raised when the stub is invoked without any argument."""

    def __init__(self) -> None:
        super().__init__("no arguments given")


class UnrecognizedArgument(ScanMockError):
    """Raised when the first argument is neither ``-f...`` nor contains ``--help``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"unrecognized argument: {argument!r}")
        self.argument = argument


class ScanImageError(ScanMockError):
    """A scanimage-compatible command could not be run or exited nonzero."""

    def __init__(
        self,
        reason: str,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(f"{reason}: {message}", exit_code=1)
        self.reason = reason
        self.returncode = returncode
        self.stderr = stderr
