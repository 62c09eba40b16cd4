# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Console entry point: python -m rrpool runs the reference self-test.

Set RRPOOL_LOG_LEVEL (e.g. DEBUG) to see the package's log records.
"""

import logging
import os
import sys

from .testing import run_selftest


def main() -> int:
    level = os.environ.get("RRPOOL_LOG_LEVEL")
    if level:
        logging.basicConfig(
            level=level.upper(), format="%(levelname)s %(name)s: %(message)s"
        )
    return 0 if run_selftest() else 1


if __name__ == "__main__":
    sys.exit(main())
