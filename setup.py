# SPDX-License-Identifier: GPL-2.0

import os
import setuptools
os.sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from lsmem import lsmem_version

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lsmem",
    version=lsmem_version.__version__,
    description="List the ranges of available memory with their online status",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: POSIX :: Linux",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=[
        "PyYAML",
    ],
    entry_points = {
        "console_scripts": ["lsmem=lsmem.lsmem:main"],
    },
    python_requires=">=3.7",
)
