"""javaeda — layered framework facade and repository automation.

Exposes the ``Application`` layer facade on top of the ``Domain`` and
``Infrastructure`` layers, plus the CI helpers for Pages health checks
and automatic patch releases.
"""

from javaeda.version import __version__

__all__: list[str] = ["__version__"]
