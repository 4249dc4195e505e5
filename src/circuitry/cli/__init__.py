"""Command-line interface for circuitry."""
