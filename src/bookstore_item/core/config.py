"""Environment configuration for book records."""

from __future__ import annotations

import os

from dotenv import dotenv_values, find_dotenv

FALLBACK_CURRENCY = "USD"

ISNI_BASE_URL = "https://isni.org/isni/"
ISBN_SEARCH_BASE_URL = "https://isbnsearch.org/isbn/"


def _setting(name: str, default: str) -> str:
    """Look up ``name`` in the process environment, then in ``.env``.

    The ``.env`` file is read without touching ``os.environ``.
    """
    value = os.environ.get(name)
    if value is None:
        path = find_dotenv(usecwd=True)
        if path:
            value = dotenv_values(path).get(name)
    return value if value is not None else default


def default_currency() -> str:
    """Currency assigned to records created without one."""
    return _setting("BOOKSTORE_DEFAULT_CURRENCY", FALLBACK_CURRENCY)
