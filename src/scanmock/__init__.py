"""scanmock package.

Modules:
- scanmock.cli: CLI entry points (scanmock, scanmock-inquire)
- scanmock.lib.core: Fixed responses, dispatcher, errors, config, paths
- scanmock.lib.inquiry: Run a scanimage-compatible tool and parse its output
- scanmock.lib._util: Internal helpers (ansi, logging)
"""

__all__ = [
    "cli",
    "lib",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("scanmock")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
