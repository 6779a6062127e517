"""Custom exception hierarchy for javaeda.

All exceptions that cross layer boundaries must inherit from
:class:`JavaedaError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
JavaedaError
├── InvalidArgumentError
├── ConfigurationError
├── GitHubApiError
├── PagesHealthError
├── ReleaseError
└── EnvironmentError
    └── EnvironmentCheckError
"""

from __future__ import annotations


class JavaedaError(Exception):
    """Base exception for all javaeda errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidArgumentError(JavaedaError, ValueError):
    """Raised when a required argument is null or empty."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(JavaedaError):
    """Raised when required automation settings are missing or malformed."""


# --- Remote services -------------------------------------------------------

class GitHubApiError(JavaedaError):
    """Raised when a GitHub REST call fails or returns an error status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int | None = status_code


class PagesHealthError(JavaedaError):
    """Raised when the Pages health check cannot be carried out."""


class ReleaseError(JavaedaError):
    """Raised when patch release detection or creation fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(JavaedaError):
    """Raised when a required runtime dependency is not available."""


class EnvironmentCheckError(EnvironmentError):
    """Raised when a required environment precondition is not met."""


def missing_dependency_error(package: str) -> EnvironmentError:
    """Build the standard error for an optional package that is absent."""
    return EnvironmentError(
        f"{package} is not installed. Install with: pip install {package}",
    )
