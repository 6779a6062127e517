"""Allow ``python -m javaeda`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m javaeda`` behaves identically to the ``javaeda`` console
script.
"""

from __future__ import annotations

from javaeda.cli.app import cli

if __name__ == "__main__":
    cli()
