"""Resultado de uma verificação: seletor -> presença no documento."""
from __future__ import annotations

from typing import Dict

#: Mapping from selector expression to "at least one node matched".
#: Keys are inserted in ascending lexicographic order of the selectors.
CheckResult = Dict[str, bool]
