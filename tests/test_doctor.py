"""Tests for the ``javaeda doctor`` command (cli/doctor.py).

Package lookups and layer readiness are patched — no dependency on the
test environment.

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS / GENERAL_ERROR depending on FAIL rows.
* Plain-text fallback without Rich.
"""

from __future__ import annotations

from importlib import metadata
from unittest.mock import MagicMock, patch

import pytest

from javaeda.cli import exit_codes
from javaeda.core.models import LayerReport


def _reports(ready: bool) -> tuple[LayerReport, ...]:
    return (
        LayerReport("Domain", "Javaeda-1.0.0-Domain", True),
        LayerReport("Infrastructure", "Javaeda-1.0.0-Infrastructure", ready),
        LayerReport("Application", "Javaeda-1.0.0-Application", ready),
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from javaeda.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestPackageCheck:
    @patch("javaeda.cli.doctor.metadata.version", return_value="0.27.0")
    def test_installed(self, _mock_version: MagicMock) -> None:
        from javaeda.cli.doctor import _httpx_check

        assert _httpx_check() == ("httpx", "0.27.0", "[green]OK[/green]")

    @patch(
        "javaeda.cli.doctor.metadata.version",
        side_effect=metadata.PackageNotFoundError("httpx"),
    )
    def test_required_missing_fails(self, _mock_version: MagicMock) -> None:
        from javaeda.cli.doctor import _httpx_check

        label, value, status = _httpx_check()
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch(
        "javaeda.cli.doctor.metadata.version",
        side_effect=metadata.PackageNotFoundError("pydantic-settings"),
    )
    def test_settings_library_missing_fails(self, _mock_version: MagicMock) -> None:
        from javaeda.cli.doctor import _pydantic_settings_check

        label, value, status = _pydantic_settings_check()
        assert label == "pydantic-settings"
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch(
        "javaeda.cli.doctor.metadata.version",
        side_effect=metadata.PackageNotFoundError("questionary"),
    )
    def test_optional_missing_warns(self, _mock_version: MagicMock) -> None:
        from javaeda.cli.doctor import _questionary_check

        _, _, status = _questionary_check()
        assert "WARN" in status


class TestLayerChecks:
    @patch("javaeda.cli.doctor.JavaedaApplication.layer_reports", return_value=_reports(False))
    def test_not_ready_layers_fail(self, _mock: MagicMock) -> None:
        from javaeda.cli.doctor import _layer_checks

        rows = _layer_checks()
        assert rows[0] == ("Domain layer", "READY", "[green]OK[/green]")
        assert rows[1][1] == "NOT READY"
        assert "FAIL" in rows[2][2]


class TestJavaedaVersionCheck:
    def test_returns_current_version(self) -> None:
        from javaeda.cli.doctor import _javaeda_version_check
        from javaeda.version import __version__

        assert _javaeda_version_check() == ("javaeda", __version__, "[green]OK[/green]")


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("javaeda.cli.doctor.metadata.version", return_value="1.0")
    @patch("javaeda.cli.doctor.JavaedaApplication.layer_reports", return_value=_reports(True))
    def test_all_pass_returns_success(self, _reports_mock: MagicMock, _ver: MagicMock) -> None:
        from javaeda.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch("javaeda.cli.doctor.metadata.version", return_value="1.0")
    @patch("javaeda.cli.doctor.JavaedaApplication.layer_reports", return_value=_reports(False))
    def test_layer_failure_returns_error(self, _reports_mock: MagicMock, _ver: MagicMock) -> None:
        from javaeda.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("javaeda.cli.doctor.metadata.version", return_value="1.0")
    @patch("javaeda.cli.doctor.JavaedaApplication.layer_reports", return_value=_reports(True))
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self,
        _reports_mock: MagicMock,
        _ver: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from javaeda.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "javaeda doctor" in err
        assert "Infrastructure layer" in err
        assert "All checks passed." in err
