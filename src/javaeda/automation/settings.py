"""Environment-driven settings for the CI automations.

Both workflows pass their inputs as environment variables.  Settings are
pydantic-settings models: every field names the variable it is read from
(``validation_alias``) and pydantic does the type coercion.  Validation
failures surface as :class:`~javaeda.exceptions.ConfigurationError`.

Tests inject an explicit mapping through ``from_env(environ)``; only the
default path reads ``os.environ``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from javaeda.exceptions import ConfigurationError

_SETTINGS_CONFIG = SettingsConfigDict(
    case_sensitive=True,
    env_ignore_empty=True,
    extra="ignore",
    frozen=True,
    populate_by_name=True,
    str_strip_whitespace=True,
)


def _split_repository(repository: str) -> tuple[str, str]:
    owner, sep, name = repository.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"must look like 'owner/name', got {repository!r}")
    return owner, name


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _configuration_error(exc: ValidationError) -> ConfigurationError:
    """Translate a pydantic ``ValidationError`` into a hinted ``ConfigurationError``."""
    errors = exc.errors()
    keys = [".".join(str(part) for part in error["loc"]) for error in errors]
    missing = [key for key, error in zip(keys, errors) if error["type"] == "missing"]
    if missing:
        names = ", ".join(missing)
        return ConfigurationError(
            f"Environment variable {names} is not set.",
            hint=f"Export {names} or run inside GitHub Actions.",
        )
    details = "; ".join(f"{key}: {error['msg']}" for key, error in zip(keys, errors))
    return ConfigurationError(
        f"Invalid configuration: {details}",
        hint=f"Check the value of {', '.join(keys)}.",
    )


def _build(
    cls: type[BaseSettings],
    environ: Mapping[str, str] | None,
    overrides: dict[str, Any],
) -> Any:
    try:
        if environ is None:
            return cls(**overrides)
        data: dict[str, Any] = {key: value for key, value in environ.items() if value.strip()}
        data.update(overrides)
        return cls.model_validate(data)
    except ValidationError as exc:
        raise _configuration_error(exc) from exc


# ---------------------------------------------------------------------------
# Pages health check
# ---------------------------------------------------------------------------

class PagesHealthSettings(BaseSettings):
    model_config = _SETTINGS_CONFIG

    repository: str = Field(validation_alias="GITHUB_REPOSITORY")
    """``owner/name`` slug."""

    owner: str | None = Field(None, validation_alias="GITHUB_REPOSITORY_OWNER")
    token: str | None = Field(None, validation_alias="GITHUB_TOKEN")
    pages_url: str | None = Field(None, validation_alias="PAGES_URL")
    """Explicit site URL; derived from the repository when ``None``."""

    extra_paths: Annotated[tuple[str, ...], NoDecode] = Field((), validation_alias="PAGES_HEALTH_PATHS")
    retries: int = Field(3, ge=1, validation_alias="PAGES_HEALTH_RETRIES")
    timeout: float = Field(10.0, gt=0, validation_alias="PAGES_HEALTH_TIMEOUT")
    retry_delay: float = Field(2.0, ge=0)

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        _split_repository(value)
        return value

    @field_validator("owner", "token", "pages_url", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("extra_paths", mode="before")
    @classmethod
    def _split_paths(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @property
    def repository_name(self) -> str:
        return _split_repository(self.repository)[1]

    @property
    def site_owner(self) -> str:
        """Owner used in the Pages host; falls back to the slug's owner."""
        return self.owner or _split_repository(self.repository)[0]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PagesHealthSettings:
        """Build settings from ``GITHUB_*`` and ``PAGES_HEALTH_*`` variables.

        Raises
        ------
        ConfigurationError
            If a required variable is missing or a value is malformed.
        """
        return _build(cls, environ, {})


# ---------------------------------------------------------------------------
# Auto patch release
# ---------------------------------------------------------------------------

class PatchReleaseSettings(BaseSettings):
    model_config = _SETTINGS_CONFIG

    repository: str = Field(validation_alias="GITHUB_REPOSITORY")
    sha: str = Field(validation_alias="GITHUB_SHA")
    token: str = Field(validation_alias="GITHUB_TOKEN")
    event_name: str = Field("push", validation_alias="GITHUB_EVENT_NAME")
    force_patch: bool = Field(False, validation_alias="FORCE_PATCH")
    java_version: str = Field("17", validation_alias="JAVA_VERSION")
    dry_run: bool = False

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        _split_repository(value)
        return value

    @property
    def forced(self) -> bool:
        """Forcing only applies to manual ``workflow_dispatch`` runs."""
        return self.force_patch and self.event_name == "workflow_dispatch"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        java_version: str | None = None,
        force_patch: bool | None = None,
        dry_run: bool = False,
    ) -> PatchReleaseSettings:
        """Build settings from the workflow environment; keyword args override it.

        Raises
        ------
        ConfigurationError
            If a required variable is missing or a value is malformed.
        """
        # Override keys are the variable names the fields are read from.
        overrides: dict[str, Any] = {"dry_run": dry_run}
        if java_version:
            overrides["JAVA_VERSION"] = java_version
        if force_patch is not None:
            overrides["FORCE_PATCH"] = force_patch
        return _build(cls, environ, overrides)
