from __future__ import annotations

import json
from pathlib import Path

import pytest

from htmlgrader.domain.errors import ConfigurationError
from htmlgrader.infrastructure import load_checks


def test_load_checks_preserves_file_order(tmp_path: Path) -> None:
    path = tmp_path / "checks.json"
    path.write_text(json.dumps(["h1", "#main", ".a"]), encoding="utf-8")

    assert load_checks(path) == ["h1", "#main", ".a"]


def test_load_checks_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_checks(tmp_path / "absent.json")

    assert "absent.json does not exist" in str(excinfo.value)


def test_load_checks_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "checks.json"
    path.write_text("[\"h1\",", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_checks(path)


@pytest.mark.parametrize("payload", [{"h1": True}, "h1", ["h1", 2], [None]])
def test_load_checks_requires_list_of_strings(tmp_path: Path, payload) -> None:
    path = tmp_path / "checks.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_checks(path)


def test_load_checks_empty_list(tmp_path: Path) -> None:
    path = tmp_path / "checks.json"
    path.write_text("[]", encoding="utf-8")

    assert load_checks(path) == []
