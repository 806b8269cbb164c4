# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Vacancy Monitor with Multithreading support.

This module fans out one fetch-and-extract task per language over a thread
pool and collects the results back in the order the languages were given.
Refactored (v. 00012) - Any per-language exception is now reported inline
instead of aborting the whole batch.
"""

import sys
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any, Dict, List, NamedTuple, Optional, cast

import requests

from src.core.extractor import search_vacancy_marker
from src.core.fetcher import VacancyPageFetcher


class MonitorResult(NamedTuple):
    """Outcome of monitoring one language.

    vacancy_count is only meaningful when error is None.
    """

    lang: str
    vacancy_count: int
    error: Optional[str] = None


class VacancyMonitor:
    """Runs the per-language fetch/extract pipeline concurrently."""

    def __init__(
        self,
        settings: Dict[str, Any],
        session: Optional[requests.Session] = None,
        verbose: bool = False,
    ) -> None:
        """Initializes the monitor.

        Args:
            settings: Effective settings (see src.core.settings).
            session: Optional pre-built session, mainly for tests.
            verbose: Print progress lines to stderr.
        """
        self.settings = settings
        self.verbose = verbose
        self.session = session if session is not None else self._init_session()
        self.fetcher = VacancyPageFetcher(self.session, settings)

    def _init_session(self) -> requests.Session:
        """Inits HTTP session."""
        session = requests.Session()
        session.headers.update({"User-Agent": self.settings["user_agent"]})
        return session

    def _log(self, message: str) -> None:
        """Prints a progress line to stderr in verbose mode."""
        if self.verbose:
            print(message, file=sys.stderr)

    def monitor(self, langs: List[str]) -> List[MonitorResult]:
        """Monitors all languages and waits for every one of them.

        Args:
            langs: Language names; duplicates are queried independently.

        Returns:
            List[MonitorResult]: One result per input, in input order.
        """
        if not langs:
            return []

        max_workers = self.settings.get("max_workers") or len(langs)
        results: List[Optional[MonitorResult]] = [None] * len(langs)
        self._log(f"🔍 Querying {len(langs)} languages ({min(max_workers, len(langs))} workers)")

        start_time = time.time()
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: Dict[Future, int] = {
                executor.submit(self.monitor_lang, lang): index for index, lang in enumerate(langs)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        self._log(f"✅ DONE! ({time.time() - start_time:.1f}s)")
        return cast(List[MonitorResult], results)

    def monitor_lang(self, lang: str) -> MonitorResult:
        """Fetches and extracts the vacancy count for one language.

        Any failure, transport or request building, is captured in the
        result and never raised, so other languages are unaffected.
        """
        try:
            page = self.fetcher.load_page(lang)
        except Exception as e:
            self._log(f"   ⚠️ [{lang}] Error: {e}")
            return MonitorResult(lang, 0, str(e))

        count = search_vacancy_marker(page)
        if count is None:
            self._log(f"   [DEBUG] [{lang}] Vacancy marker not found, reporting 0")
            count = 0
        else:
            self._log(f"   ✓ [{lang}] {count} vacancies")
        return MonitorResult(lang, count)


# End of src/core/monitor.py (v. 00012)
