"""Core layer — framework identity, value objects and pure release rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``, ``infra`` or ``automation``.
"""

from javaeda.core.framework import (
    APPLICATION_LAYER,
    DOMAIN_LAYER,
    FRAMEWORK_NAME,
    INFRASTRUCTURE_LAYER,
    build_layer_identifier,
    format_readiness,
)
from javaeda.core.models import (
    Commit,
    CommitRange,
    LayerReport,
    PageCheck,
    PageResponse,
    PagesHealthReport,
    PatchDecision,
    SemanticVersion,
    Tag,
)
from javaeda.core.protocols import PageFetcher, RepositoryHost

__all__: list[str] = [
    "APPLICATION_LAYER",
    "Commit",
    "CommitRange",
    "DOMAIN_LAYER",
    "FRAMEWORK_NAME",
    "INFRASTRUCTURE_LAYER",
    "LayerReport",
    "PageCheck",
    "PageFetcher",
    "PageResponse",
    "PagesHealthReport",
    "PatchDecision",
    "RepositoryHost",
    "SemanticVersion",
    "Tag",
    "build_layer_identifier",
    "format_readiness",
]
