"""Application layer — the facade over the domain and infrastructure layers.

May import from ``core``, ``domain``, ``infra`` and ``utils``; must not
import from ``cli`` or ``automation``.
"""

from javaeda.application.facade import JavaedaApplication

__all__: list[str] = ["JavaedaApplication"]
