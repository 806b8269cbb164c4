# tests/conftest.py
import pytest
import requests

from src.core.settings import load_settings
from tests.fakes import FakeSession, vacancy_page


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def fake_session():
    return FakeSession(
        {
            "go": vacancy_page(120),
            "rust": vacancy_page(15),
            "cobol": b"<html>nothing here</html>",
            "broken": requests.ConnectionError("connection refused"),
        }
    )
