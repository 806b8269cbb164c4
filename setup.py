# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Setup entry point for hhMonitor.

This module serves as a compatibility shim to support standard pip installation
routines, deferring all package metadata and dependency configuration
to 'pyproject.toml'.
"""

from setuptools import setup  # type: ignore

if __name__ == "__main__":
    setup()

# End of setup.py (v. 00003)
