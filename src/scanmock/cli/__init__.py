# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry points.

- ``scanmock.cli.main``: the scanimage stub (``scanmock``)
- ``scanmock.cli.inquire``: device and capability inquiry (``scanmock-inquire``)
"""
