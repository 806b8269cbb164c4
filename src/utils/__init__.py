# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Output helpers for hhMonitor."""

# End of src/utils/__init__.py (v. 00001)
