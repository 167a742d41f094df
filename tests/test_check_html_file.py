from __future__ import annotations

import json
from pathlib import Path

import pytest

from htmlgrader import InputNotFoundError, check_html_file


def test_check_html_file(tmp_path: Path) -> None:
    checks = tmp_path / "checks.json"
    checks.write_text(json.dumps(["title", "h1", "footer"]), encoding="utf-8")
    page = tmp_path / "index.html"
    page.write_text("<title>T</title><h1>Oi", encoding="utf-8")

    assert check_html_file(page, checks) == {"footer": False, "h1": True, "title": True}


def test_check_html_file_missing_page(tmp_path: Path) -> None:
    checks = tmp_path / "checks.json"
    checks.write_text("[]", encoding="utf-8")

    with pytest.raises(InputNotFoundError):
        check_html_file(tmp_path / "absent.html", checks)
