"""Infrastructure layer descriptor."""

from __future__ import annotations

import logging

from javaeda.core.framework import INFRASTRUCTURE_LAYER, build_layer_identifier

logger = logging.getLogger(__name__)


class InfrastructureLayer:
    """Static accessors describing the infrastructure layer."""

    @staticmethod
    def get_layer_name() -> str:
        return INFRASTRUCTURE_LAYER

    @staticmethod
    def get_layer_identifier() -> str:
        return build_layer_identifier(INFRASTRUCTURE_LAYER)

    @staticmethod
    def is_ready() -> bool:
        """Return ``True`` when the HTTP transport (httpx) is importable.

        Never raises — a missing transport simply reports not ready.
        """
        try:
            import httpx  # noqa: F401
        except ImportError:
            logger.warning("httpx is not installed; infrastructure layer not ready")
            return False
        return True
