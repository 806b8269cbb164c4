# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Report formatting.

Output format:
    [06-01-02 15:04]
    lang_1=10
    lang_2=50
    ...
    lang_n=20
"""

from datetime import datetime
from typing import List, Optional

from src.core.monitor import MonitorResult

TIMESTAMP_FORMAT: str = "[%y-%m-%d %H:%M]"


def format_result_line(result: MonitorResult) -> str:
    """Returns 'lang=count', or 'lang=error text' when the fetch failed."""
    value = result.error if result.error is not None else str(result.vacancy_count)
    return f"{result.lang}={value}\n"


def form_stat_entry(results: List[MonitorResult], now: Optional[datetime] = None) -> str:
    """Builds the report block for one run.

    Args:
        results: Per-language results, already in input order.
        now: Timestamp for the header; local time if omitted.

    Returns:
        str: Header line plus one line per result, each ending in a newline.
    """
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    lines = [stamp + "\n"]
    lines.extend(format_result_line(r) for r in results)
    return "".join(lines)


# End of src/core/report.py (v. 00002)
