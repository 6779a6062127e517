"""Shared utilities — argument validation and cross-cutting helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from javaeda.utils.validation import require_non_empty, require_non_null

__all__: list[str] = ["require_non_empty", "require_non_null"]
