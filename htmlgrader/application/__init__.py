"""Application services coordinating sources, engine and output."""

from .dispatcher import Checker, SourceDispatcher
from .services import check_html_file

__all__ = ["Checker", "SourceDispatcher", "check_html_file"]
