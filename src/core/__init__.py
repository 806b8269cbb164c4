# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Core package for the hhMonitor pipeline.

This package contains the search settings, the page fetcher, the vacancy
marker extractor, the concurrent monitor (VacancyMonitor) and the report
formatter.
"""

# End of src/core/__init__.py (v. 00002)
