"""Application layer facade.

:class:`JavaedaApplication` is the single entry point that describes the
application layer: its name and identifier, whether the layers it
builds on are ready, human-readable status strings, and validation of
application configuration.  Every method is static and stateless.
"""

from __future__ import annotations

from javaeda.core.framework import (
    APPLICATION_LAYER,
    FRAMEWORK_NAME,
    build_layer_identifier,
    format_readiness,
)
from javaeda.core.models import LayerReport
from javaeda.domain.layer import DomainLayer
from javaeda.infra.layer import InfrastructureLayer
from javaeda.utils.validation import require_non_empty, require_non_null
from javaeda.version import __version__


class JavaedaApplication:
    """Static accessors for the ``Application`` layer."""

    LAYER_NAME: str = APPLICATION_LAYER

    @staticmethod
    def get_layer_name() -> str:
        """Return the fixed layer label ``"Application"``."""
        return JavaedaApplication.LAYER_NAME

    @staticmethod
    def get_layer_identifier() -> str:
        """Return ``<framework>-<version>-Application``."""
        return build_layer_identifier(JavaedaApplication.LAYER_NAME)

    @staticmethod
    def is_application_layer_ready() -> bool:
        """Return ``True`` only if both the domain and infrastructure layers are ready."""
        return DomainLayer.is_ready() and InfrastructureLayer.is_ready()

    @staticmethod
    def get_application_status() -> str:
        """Return e.g. ``"Javaeda-1.0.0-Application: READY"``."""
        identifier = JavaedaApplication.get_layer_identifier()
        ready = JavaedaApplication.is_application_layer_ready()
        return f"{identifier}: {format_readiness(ready)}"

    @staticmethod
    def get_framework_status() -> str:
        """Return a multi-line readiness summary of all three layers."""
        lines = [f"{FRAMEWORK_NAME} Framework Status (v{__version__})"]
        lines.extend(
            f"  {report.name}: {format_readiness(report.ready)}"
            for report in JavaedaApplication.layer_reports()
        )
        return "\n".join(lines)

    @staticmethod
    def validate_application_config(name: str | None, config: object | None) -> None:
        """Check that *name* is non-empty and *config* is present.

        Raises
        ------
        InvalidArgumentError
            If *name* is ``None`` or blank, or *config* is ``None``.
        """
        require_non_empty(name, "Application name")
        require_non_null(config, "Application configuration")

    @staticmethod
    def layer_reports() -> tuple[LayerReport, ...]:
        """Return readiness reports for Domain, Infrastructure and Application."""
        domain_ready = DomainLayer.is_ready()
        infra_ready = InfrastructureLayer.is_ready()
        return (
            LayerReport(
                name=DomainLayer.get_layer_name(),
                identifier=DomainLayer.get_layer_identifier(),
                ready=domain_ready,
            ),
            LayerReport(
                name=InfrastructureLayer.get_layer_name(),
                identifier=InfrastructureLayer.get_layer_identifier(),
                ready=infra_ready,
            ),
            LayerReport(
                name=JavaedaApplication.get_layer_name(),
                identifier=JavaedaApplication.get_layer_identifier(),
                ready=domain_ready and infra_ready,
            ),
        )
