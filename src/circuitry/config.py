"""Configuration for circuit analysis."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_EDGE_CAPACITY = 1000
DEFAULT_TOP_COMPONENTS = 3
DEFAULT_OUTPUT_PATH = "output.txt"

_ENV_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("CIRCUITRY_EDGE_CAPACITY", "edge_capacity"),
    ("CIRCUITRY_TOP_COMPONENTS", "top_components"),
    ("CIRCUITRY_OUTPUT_PATH", "output_path"),
)


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable parameters of the analysis.

    Attributes:
        edge_capacity: How many globally shortest edges the clustering pass keeps (K).
        top_components: How many of the largest components are multiplied together.
        output_path: Where the CLI writes its answer.
    """

    edge_capacity: int = DEFAULT_EDGE_CAPACITY
    top_components: int = DEFAULT_TOP_COMPONENTS
    output_path: str = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        if self.edge_capacity < 0:
            raise ValueError(f"edge_capacity must be >= 0, got {self.edge_capacity}")
        if self.top_components < 1:
            raise ValueError(f"top_components must be >= 1, got {self.top_components}")
        if not self.output_path:
            raise ValueError("output_path must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "edge_capacity": self.edge_capacity,
            "top_components": self.top_components,
            "output_path": self.output_path,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisConfig:
        """Build from loosely typed values.

        Values that cannot be converted fall back to defaults; converted
        values that fail validation raise ValueError.
        """
        try:
            edge_capacity = int(data.get("edge_capacity", DEFAULT_EDGE_CAPACITY))
            top_components = int(data.get("top_components", DEFAULT_TOP_COMPONENTS))
            output_path = str(data.get("output_path", DEFAULT_OUTPUT_PATH))
        except (ValueError, TypeError):
            logger.warning("Invalid analysis config %r, using defaults", data)
            return cls()  # Fall back to safe defaults

        return cls(
            edge_capacity=edge_capacity,
            top_components=top_components,
            output_path=output_path,
        )

    @classmethod
    def load(cls, path: str | Path | None = None) -> AnalysisConfig:
        """Load from the ``[analysis]`` table of a TOML file, then apply env overrides.

        A missing file is not an error; defaults are used.
        """
        data: dict[str, Any] = {}
        if path is not None:
            config_path = Path(path)
            if config_path.exists():
                with config_path.open("rb") as f:
                    data = dict(tomllib.load(f).get("analysis", {}))
            else:
                logger.debug("Config file %s not found, using defaults", config_path)

        for env_name, key in _ENV_OVERRIDES:
            value = os.environ.get(env_name)
            if value:
                data[key] = value

        return cls.from_dict(data)
