"""Infrastructure layer — external system integration.

This layer wraps all interaction with the GitHub REST API and the
published Pages site.  Every raw third-party exception must be caught
here and re-raised as a :class:`~javaeda.exceptions.JavaedaError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the automation layer.
"""

from javaeda.infra.github_client import GitHubClient
from javaeda.infra.layer import InfrastructureLayer
from javaeda.infra.pages_probe import HttpPageProbe

__all__: list[str] = [
    "GitHubClient",
    "HttpPageProbe",
    "InfrastructureLayer",
]
