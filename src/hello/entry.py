"""Console script entry point with production wiring.

The ``hello`` console script points here. Production services are wired
from the composition layer before the CLI runs, keeping the adapters
layer free of composition imports.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``hello`` command with production services.

    Returns:
        Exit code from CLI execution; ``0`` for every normal run.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
