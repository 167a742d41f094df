"""Contracts implemented by the infrastructure layer."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from .entities import SourceDescriptor


class HtmlSource(ABC):
    """Defines the contract for acquiring the raw HTML of one input."""

    @property
    @abstractmethod
    def descriptor(self) -> SourceDescriptor:
        """Describe the input this source reads from."""

    @abstractmethod
    async def fetch(self) -> Union[bytes, str]:
        """Return the raw HTML, raising ``InputError`` when it cannot be obtained."""
