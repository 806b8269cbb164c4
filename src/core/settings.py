# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Search Settings Module.

Holds the built-in search parameters for spb.hh.ru and merges optional
overrides from a JSON file supplied on the command line.
Refactored (v. 00005) - Added type and range checks for timeout and max_workers.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, cast


class InvalidJSONContentError(TypeError):
    """Raised when the loaded JSON content is not a dictionary."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("JSON content must be a dictionary")


class UnknownSettingError(KeyError):
    """Raised when an override file contains a key the monitor does not know."""

    def __init__(self, key: str) -> None:
        """Initialize the exception.

        Args:
            key: The offending settings key.
        """
        super().__init__(f"Unknown setting: {key}")
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidSettingError(ValueError):
    """Raised when a setting has a value of the wrong type or range."""

    def __init__(self, key: str, value: Any, expected: str) -> None:
        """Initialize the exception.

        Args:
            key: The offending settings key.
            value: The rejected value.
            expected: Human readable description of accepted values.
        """
        super().__init__(f"Invalid value for {key}: {value!r} (expected {expected})")
        self.key = key


DEFAULT_SETTINGS: Dict[str, Any] = {
    "base_url": "https://spb.hh.ru/search/vacancy",
    # Order matters: 'text' is always appended last by the fetcher
    "query_params": {
        "area": "2",
        "professional_role": "96",
        "search_field": "name",
    },
    # None = no timeout, wait forever
    "timeout": None,
    # None = one worker per language
    "max_workers": None,
    "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}


def load_json(path: Path) -> Dict[str, Any]:
    """Loads a JSON object from disk.

    Args:
        path: Path to a UTF-8 encoded JSON file.

    Returns:
        Dict[str, Any]: The decoded object.

    Raises:
        InvalidJSONContentError: If the top-level value is not an object.
    """
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidJSONContentError()
    return cast(Dict[str, Any], data)


def _is_number(value: Any) -> bool:
    """Returns True for int/float values, excluding bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Checks the value types the monitor relies on.

    Args:
        settings: Effective settings, after file and CLI overrides.

    Returns:
        Dict[str, Any]: The same dictionary, for chaining.

    Raises:
        InvalidSettingError: If timeout or max_workers is out of range,
            or a string setting is not a string.
    """
    timeout = settings.get("timeout")
    if timeout is not None and not (_is_number(timeout) and timeout > 0):
        raise InvalidSettingError("timeout", timeout, "a positive number or null")

    max_workers = settings.get("max_workers")
    if max_workers is not None and not (_is_number(max_workers) and isinstance(max_workers, int) and max_workers > 0):
        raise InvalidSettingError("max_workers", max_workers, "a positive integer or null")

    for key in ("base_url", "user_agent"):
        if not isinstance(settings.get(key), str):
            raise InvalidSettingError(key, settings.get(key), "a string")
    return settings


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Builds the effective settings for one run.

    Args:
        config_path: Optional JSON file whose keys override the defaults.
            ``query_params`` is merged key by key, other keys are replaced.

    Returns:
        Dict[str, Any]: A fresh settings dictionary, safe to mutate.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if not config_path:
        return settings

    overrides = load_json(Path(config_path))
    for key, value in overrides.items():
        if key not in settings:
            raise UnknownSettingError(key)
        if key == "query_params":
            if not isinstance(value, dict):
                raise InvalidJSONContentError()
            settings["query_params"].update({k: str(v) for k, v in value.items()})
        else:
            settings[key] = value
    return validate_settings(settings)


# End of src/core/settings.py (v. 00005)
