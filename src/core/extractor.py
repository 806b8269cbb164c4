# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Vacancy Count Extractor.

Scans a raw search page for the "<N> ваканс..." header that hh.ru renders
above the result list and returns N.
"""

import re
from typing import Optional

# Works on the undecoded body; [0-9] keeps the match ASCII-only
VACANCY_MARKER_RE = re.compile(rb"([0-9]+) " + "ваканс".encode("utf-8"))


def search_vacancy_marker(page: bytes) -> Optional[int]:
    """Returns the count from the first vacancy marker, or None if there is none."""
    match = VACANCY_MARKER_RE.search(page)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def find_vacancy_count(page: bytes) -> int:
    """Returns the vacancy count shown on the page.

    A page without the marker yields 0, same as a search with no hits.

    Args:
        page: Raw response body.

    Returns:
        int: The leading number of the first marker, or 0.
    """
    count = search_vacancy_marker(page)
    return count if count is not None else 0


# End of src/core/extractor.py (v. 00003)
