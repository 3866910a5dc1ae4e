#!/usr/bin/env python3
#
# Copyright (c)  2023  Xiaomi Corporation (author: Wei Kang)

import re

import setuptools


def get_package_version():
    with open("textalign/python/textalign/__init__.py") as f:
        content = f.read()

    latest_version = re.search(r"__version__ = (.*)", content).group(1)
    latest_version = latest_version.strip().strip('"').strip("'")
    return latest_version


setuptools.setup(
    name="textalign",
    version=get_package_version(),
    description="Levenshtein distance with CIGAR alignments, "
    "KMP search and a line filter",
    python_requires=">=3.7",
    package_dir={
        "textalign": "textalign/python/textalign",
    },
    packages=["textalign"],
    install_requires=[
        "numpy",
        "regex",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "textalign-align=textalign.cli:align_main",
            "textalign-grep=textalign.cli:grep_main",
        ],
    },
)
