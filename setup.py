#!/usr/bin/env python3
"""
Setup script for scanmock for tools that still call setup.py directly.

Package metadata lives in pyproject.toml; this script only mirrors it.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]

    # Get dependencies; optional ones become extras
    install_requires = []
    optional = {}
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        elif version_spec.get("optional"):
            optional[dep] = f"{dep}{version_spec.get('version', '')}"
        else:
            install_requires.append(f"{dep}{version_spec.get('version', '')}")

    extras_require = {
        extra: [optional[name] for name in names if name in optional]
        for extra, names in poetry.get("extras", {}).items()
    }

    console_scripts = [f"{name}={target}" for name, target in poetry.get("scripts", {}).items()]

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={"console_scripts": console_scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
