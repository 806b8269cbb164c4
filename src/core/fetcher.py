# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""HH.ru Search Page Fetcher.

Loads the raw vacancy search page for a single programming language.
The language is passed through requests' own query encoding, so names such
as "c++" or "c#" reach the site intact instead of corrupting the URL.
Refactored (v. 00007) - Switched to a shared session and optional timeout.
"""

from typing import Any, Dict, Optional

import requests


class VacancyPageFetcher:
    """Fetches spb.hh.ru search result pages as raw bytes."""

    def __init__(self, session: requests.Session, settings: Dict[str, Any]) -> None:
        """Initializes the fetcher.

        Args:
            session: Shared requests session for connection pooling.
            settings: Effective settings (see src.core.settings).
        """
        self.session = session
        self.base_url: str = settings["base_url"]
        self.query_params: Dict[str, str] = dict(settings["query_params"])
        self.timeout: Optional[float] = settings.get("timeout")

    def _params(self, lang: str) -> Dict[str, str]:
        params = dict(self.query_params)
        params["text"] = lang
        return params

    def build_url(self, lang: str) -> str:
        """Returns the exact URL that load_page() requests for a language."""
        request = requests.Request("GET", self.base_url, params=self._params(lang))
        return str(request.prepare().url)

    def load_page(self, lang: str) -> bytes:
        """Performs one GET for the language and returns the body.

        No status check and no retry: a 404 or 503 body is returned like any
        other page.

        Args:
            lang: Language name, used verbatim as the 'text' query value.

        Returns:
            bytes: The full response body.

        Raises:
            requests.RequestException: On DNS, connection, timeout or read errors.
        """
        response = self.session.get(self.base_url, params=self._params(lang), timeout=self.timeout)
        try:
            return response.content
        finally:
            response.close()


# End of src/core/fetcher.py (v. 00007)
