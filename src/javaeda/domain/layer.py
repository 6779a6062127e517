"""Domain layer descriptor."""

from __future__ import annotations

import logging

from javaeda.core.framework import DOMAIN_LAYER, build_layer_identifier
from javaeda.exceptions import InvalidArgumentError
from javaeda.utils.validation import require_non_empty, require_non_null

logger = logging.getLogger(__name__)


class DomainLayer:
    """Static accessors describing the domain layer."""

    @staticmethod
    def get_layer_name() -> str:
        return DOMAIN_LAYER

    @staticmethod
    def get_layer_identifier() -> str:
        return build_layer_identifier(DOMAIN_LAYER)

    @staticmethod
    def is_ready() -> bool:
        """Return ``True`` when the argument validation contract holds.

        The domain layer performs no I/O.  It is ready when the shared
        validators pass a valid value through and reject ``None`` and
        blank input with :class:`InvalidArgumentError`.
        """
        try:
            accepted = require_non_empty(require_non_null(DOMAIN_LAYER, "Layer"), "Layer")
        except InvalidArgumentError as exc:
            logger.warning("Domain layer validator rejected a valid value: %s", exc)
            return False
        if accepted != DOMAIN_LAYER:
            logger.warning("Domain layer validator altered a valid value")
            return False

        checks = (("require_non_null", require_non_null, None), ("require_non_empty", require_non_empty, " "))
        for label, validator, invalid in checks:
            try:
                validator(invalid, "Layer")
            except InvalidArgumentError:
                continue
            logger.warning("Domain layer validator %s accepted %r", label, invalid)
            return False
        return True
