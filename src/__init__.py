# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""hhMonitor source package."""

# End of src/__init__.py (v. 00001)
