# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Fixed text printed by the scanimage stub.

Both payloads are reproduced byte-for-byte; callers that parse real
``scanimage`` output rely on the exact spacing.
"""

# Answer to ``-f "scanner,%d,%v,%t,%m,%i"``: one mock feeder scanner.
DEVICE_LIST = "scanner,kds_i2000:i2000,Kodak,feeder scanner,i2000,0\n"

# Answer to ``--help``: the device-specific option section only.
USAGE_BLOCK = (
    "    --resolution 200|300|600 [200]\n"
    "    --mode Lineart|Gray|Color [Gray]\n"
    "    -x 10..100mm [xx]\n"
    "    -y 10..100mm [xx]\n"
)

LIST_DEVICES_PREFIX = "-f"
HELP_MARKER = "--help"
