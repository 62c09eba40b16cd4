# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

#!/usr/bin/env python3
# rrpool Python package setup

import pathlib
from datetime import datetime

from setuptools import setup

readme = None

date = datetime.now().strftime("%y.%m.%d")
version = "0.1." + date + ".dev0"

# Read README.md file from project root
readme_path = pathlib.Path(__file__).absolute().parent / "README.md"
with open(str(readme_path), "r", encoding="utf-8") as f:
    readme = f.read()

setup(
    name="rrpool",
    version=version,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2,<3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=["rrpool"],
    package_dir={
        "rrpool": "python/rrpool",
    },
    entry_points={
        "console_scripts": ["rrpool-selftest=rrpool.__main__:main"],
    },
    zip_safe=False,
    # Write to readme
    long_description=readme,
    long_description_content_type="text/markdown",
)
