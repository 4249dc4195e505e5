"""Allow ``python -m circuitry``."""

from circuitry.cli.main import app

app()
