"""Leitura do arquivo JSON com a lista de seletores a verificar."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from htmlgrader.domain.errors import ConfigurationError

_log = logging.getLogger("htmlgrader.checks")


def load_checks(path: Union[str, Path]) -> List[str]:
    """Load the selectors listed in the JSON array stored at ``path``.

    The order of the file is preserved; sorting belongs to the engine.
    """

    checks_path = Path(path)
    if not checks_path.is_file():
        raise ConfigurationError(f"{checks_path} does not exist. Exiting.")

    try:
        payload = json.loads(checks_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Could not read checks file {checks_path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(
            f"Checks file {checks_path} is not valid JSON: {exc}"
        ) from exc

    if not isinstance(payload, list):
        raise ConfigurationError(
            f"Checks file {checks_path} must contain a JSON array of selectors"
        )
    for index, item in enumerate(payload):
        if not isinstance(item, str):
            raise ConfigurationError(
                f"Checks file {checks_path}: entry {index} is not a string ({item!r})"
            )

    _log.debug("%d selector(s) loaded from %s", len(payload), checks_path)
    return payload


__all__ = ["load_checks"]
