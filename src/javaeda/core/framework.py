"""Framework identity — name, version and layer labels.

Pure constants and string helpers; no I/O.
"""

from __future__ import annotations

from javaeda.version import __version__

FRAMEWORK_NAME: str = "Javaeda"

DOMAIN_LAYER: str = "Domain"
INFRASTRUCTURE_LAYER: str = "Infrastructure"
APPLICATION_LAYER: str = "Application"

READY: str = "READY"
NOT_READY: str = "NOT READY"


def format_readiness(ready: bool) -> str:
    """Render a readiness flag as ``"READY"`` / ``"NOT READY"``."""
    return READY if ready else NOT_READY


def build_layer_identifier(layer_name: str) -> str:
    """Join framework name, framework version and *layer_name*.

    ``build_layer_identifier("Application")`` -> ``"Javaeda-1.0.0-Application"``
    """
    return f"{FRAMEWORK_NAME}-{__version__}-{layer_name}"
