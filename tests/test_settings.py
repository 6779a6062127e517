"""Tests for environment-driven settings (automation/settings.py).

Most tests pass an explicit mapping; the process environment is only
read through ``monkeypatch``.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from javaeda.automation.settings import PagesHealthSettings, PatchReleaseSettings
from javaeda.exceptions import ConfigurationError

RELEASE_ENV = {
    "GITHUB_REPOSITORY": "acme/widgets",
    "GITHUB_SHA": "abc123",
    "GITHUB_TOKEN": "t0ken",
    "GITHUB_EVENT_NAME": "push",
}


# ---------------------------------------------------------------------------
# PagesHealthSettings
# ---------------------------------------------------------------------------

class TestPagesHealthSettings:
    def test_minimal_env(self) -> None:
        settings = PagesHealthSettings.from_env({"GITHUB_REPOSITORY": "acme/widgets"})
        assert settings.owner is None
        assert settings.site_owner == "acme"
        assert settings.repository_name == "widgets"
        assert settings.token is None
        assert settings.retries == 3
        assert settings.timeout == 10.0
        assert settings.extra_paths == ()

    def test_full_env(self) -> None:
        settings = PagesHealthSettings.from_env({
            "GITHUB_REPOSITORY": "acme/widgets",
            "GITHUB_REPOSITORY_OWNER": "Acme",
            "GITHUB_TOKEN": "t",
            "PAGES_URL": "https://docs.acme.dev/",
            "PAGES_HEALTH_PATHS": "apidocs/, ,guide.html",
            "PAGES_HEALTH_RETRIES": "5",
            "PAGES_HEALTH_TIMEOUT": "2.5",
        })
        assert settings.site_owner == "Acme"
        assert settings.token == "t"
        assert settings.pages_url == "https://docs.acme.dev/"
        assert settings.extra_paths == ("apidocs/", "guide.html")
        assert settings.retries == 5
        assert settings.timeout == 2.5

    def test_missing_repository(self) -> None:
        with pytest.raises(ConfigurationError, match="GITHUB_REPOSITORY") as exc_info:
            PagesHealthSettings.from_env({})
        assert exc_info.value.hint is not None

    @pytest.mark.parametrize("repository", ["widgets", "/widgets", "acme/", "a/b/c"])
    def test_malformed_repository(self, repository: str) -> None:
        with pytest.raises(ConfigurationError, match="owner/name"):
            PagesHealthSettings.from_env({"GITHUB_REPOSITORY": repository})

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("PAGES_HEALTH_RETRIES", "three"),
            ("PAGES_HEALTH_RETRIES", "0"),
            ("PAGES_HEALTH_TIMEOUT", "-1"),
            ("PAGES_HEALTH_TIMEOUT", "soon"),
        ],
    )
    def test_bad_numbers(self, key: str, value: str) -> None:
        with pytest.raises(ConfigurationError, match=key):
            PagesHealthSettings.from_env({"GITHUB_REPOSITORY": "acme/widgets", key: value})


# ---------------------------------------------------------------------------
# PatchReleaseSettings
# ---------------------------------------------------------------------------

class TestPatchReleaseSettings:
    def test_defaults(self) -> None:
        settings = PatchReleaseSettings.from_env(RELEASE_ENV)
        assert settings.repository == "acme/widgets"
        assert settings.sha == "abc123"
        assert settings.java_version == "17"
        assert settings.force_patch is False
        assert settings.forced is False
        assert settings.dry_run is False

    def test_force_from_env_on_dispatch(self) -> None:
        env = {**RELEASE_ENV, "GITHUB_EVENT_NAME": "workflow_dispatch", "FORCE_PATCH": "true"}
        settings = PatchReleaseSettings.from_env(env)
        assert settings.forced is True

    def test_force_ignored_on_push(self) -> None:
        settings = PatchReleaseSettings.from_env({**RELEASE_ENV, "FORCE_PATCH": "true"})
        assert settings.force_patch is True
        assert settings.forced is False

    def test_keyword_overrides(self) -> None:
        env = {**RELEASE_ENV, "FORCE_PATCH": "true", "JAVA_VERSION": "11"}
        settings = PatchReleaseSettings.from_env(env, java_version="21", force_patch=False, dry_run=True)
        assert settings.java_version == "21"
        assert settings.force_patch is False
        assert settings.dry_run is True

    def test_java_version_from_env(self) -> None:
        settings = PatchReleaseSettings.from_env({**RELEASE_ENV, "JAVA_VERSION": "11"})
        assert settings.java_version == "11"

    @pytest.mark.parametrize("missing", ["GITHUB_REPOSITORY", "GITHUB_SHA", "GITHUB_TOKEN"])
    def test_required_variables(self, missing: str) -> None:
        env = {k: v for k, v in RELEASE_ENV.items() if k != missing}
        with pytest.raises(ConfigurationError, match=missing):
            PatchReleaseSettings.from_env(env)

    def test_missing_event_defaults_to_push(self) -> None:
        env = {k: v for k, v in RELEASE_ENV.items() if k != "GITHUB_EVENT_NAME"}
        assert PatchReleaseSettings.from_env(env).event_name == "push"

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("TRUE", True), ("1", True), ("no", False), ("off", False)])
    def test_force_patch_parsing(self, raw: str, expected: bool) -> None:
        settings = PatchReleaseSettings.from_env({**RELEASE_ENV, "FORCE_PATCH": raw})
        assert settings.force_patch is expected

    def test_invalid_force_patch(self) -> None:
        with pytest.raises(ConfigurationError, match="FORCE_PATCH") as exc_info:
            PatchReleaseSettings.from_env({**RELEASE_ENV, "FORCE_PATCH": "maybe"})
        assert "FORCE_PATCH" in (exc_info.value.hint or "")

    def test_blank_force_patch_means_false(self) -> None:
        assert PatchReleaseSettings.from_env({**RELEASE_ENV, "FORCE_PATCH": ""}).force_patch is False


# ---------------------------------------------------------------------------
# Process environment
# ---------------------------------------------------------------------------

class TestProcessEnvironment:
    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key, value in RELEASE_ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv("JAVA_VERSION", "11")
        monkeypatch.setenv("FORCE_PATCH", "true")
        settings = PatchReleaseSettings.from_env(java_version="21", force_patch=False)
        assert settings.repository == "acme/widgets"
        assert settings.java_version == "21"
        assert settings.force_patch is False

    def test_missing_variable_in_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
        with pytest.raises(ConfigurationError, match="GITHUB_REPOSITORY"):
            PagesHealthSettings.from_env()

    def test_paths_are_split_not_json_decoded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_REPOSITORY", "acme/widgets")
        monkeypatch.setenv("PAGES_HEALTH_PATHS", "apidocs/,guide.html")
        assert PagesHealthSettings.from_env().extra_paths == ("apidocs/", "guide.html")


class TestImmutability:
    def test_settings_are_frozen(self) -> None:
        settings = PagesHealthSettings.from_env({"GITHUB_REPOSITORY": "acme/widgets"})
        with pytest.raises(ValidationError):
            settings.retries = 5  # type: ignore[misc]
