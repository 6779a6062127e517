"""Domain layer — pure framework concepts with no external integration.

Rules
-----
* No I/O.
* No imports from ``cli``, ``infra``, ``application`` or ``automation``.
"""

from javaeda.domain.layer import DomainLayer

__all__: list[str] = ["DomainLayer"]
