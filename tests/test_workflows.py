"""Checks on the GitHub Actions workflow files that run the CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

WORKFLOWS = Path(__file__).resolve().parent.parent / ".github" / "workflows"


def _read(name: str) -> str:
    path = WORKFLOWS / name
    if not path.is_file():
        pytest.skip(f"{name} is not available in this checkout")
    return path.read_text(encoding="utf-8")


class TestPagesHealthWorkflow:
    def test_token_can_read_pages_build_status(self) -> None:
        text = _read("pages-health-check.yml")
        assert "permissions:" in text
        assert "pages: read" in text

    def test_runs_pages_health_command(self) -> None:
        assert "javaeda -v pages-health" in _read("pages-health-check.yml")


class TestAutoPatchWorkflow:
    def test_token_can_create_releases(self) -> None:
        assert "contents: write" in _read("auto-patch-release.yml")

    def test_runs_auto_patch_command(self) -> None:
        assert "javaeda -v auto-patch" in _read("auto-patch-release.yml")
