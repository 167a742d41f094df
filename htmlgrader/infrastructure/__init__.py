"""Infrastructure public API for htmlgrader.

Exposes the concrete HTML sources and the checks file loader so consumers can
import from ``htmlgrader.infrastructure`` directly.
"""

from .checks_file import load_checks
from .sources import FileSource, UrlSource

__all__ = ["FileSource", "UrlSource", "load_checks"]
