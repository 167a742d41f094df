"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_CHECKS_FILE = "checks.json"
_DEFAULT_OUTPUT_FORMAT = "JSON"
_DEFAULT_HTTP_TIMEOUT = 15.0
_DEFAULT_PARSER = "html5lib"
_DEFAULT_LOG_LEVEL = "WARNING"


@lru_cache(maxsize=None)
def get_checks_file() -> str:
    """Return the default path of the JSON file listing the selectors."""

    return os.getenv("HTMLGRADER_CHECKS_FILE", _DEFAULT_CHECKS_FILE)


@lru_cache(maxsize=None)
def get_output_format() -> str:
    """Return the output format used when ``--output`` is omitted."""

    return os.getenv("HTMLGRADER_OUTPUT_FORMAT", _DEFAULT_OUTPUT_FORMAT)


@lru_cache(maxsize=None)
def get_http_timeout() -> float:
    """Return the timeout, in seconds, applied to URL fetches."""

    return float(os.getenv("HTMLGRADER_HTTP_TIMEOUT", _DEFAULT_HTTP_TIMEOUT))


@lru_cache(maxsize=None)
def get_parser_features() -> str:
    """Return the BeautifulSoup tree builder used to parse documents."""

    return os.getenv("HTMLGRADER_PARSER", _DEFAULT_PARSER)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("HTMLGRADER_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


__all__ = [
    "get_checks_file",
    "get_http_timeout",
    "get_log_level",
    "get_output_format",
    "get_parser_features",
]
