"""
Graph construction settings.

Reads a small YAML file (e.g. `insertion_mode: symmetric`) and builds an
empty graph from it. Only construction is configured; graphs themselves are
never loaded from or written to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging

import yaml

from undirected_graph import EdgeInsertionMode, UndirectedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphConfig:
    insertion_mode: EdgeInsertionMode = EdgeInsertionMode.ONE_WAY


def _parse_insertion_mode(value: object) -> EdgeInsertionMode:
    try:
        return EdgeInsertionMode(value)
    except ValueError:
        accepted = ", ".join(m.value for m in EdgeInsertionMode)
        raise ValueError(
            f"Unknown insertion_mode {value!r}; expected one of: {accepted}."
        ) from None


def load_config(path: Path) -> GraphConfig:
    """
    Load a GraphConfig from a YAML mapping.

    An empty file or a missing key falls back to the defaults.

    Raises:
        ValueError: if the document is not a mapping or a value is unknown.
    """
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Graph config {path} must be a mapping, got {type(data).__name__}."
        )

    config = GraphConfig()
    if "insertion_mode" in data:
        config = GraphConfig(insertion_mode=_parse_insertion_mode(data["insertion_mode"]))

    logger.debug("loaded graph config from %s: %s", path, config)
    return config


def build_graph(config: GraphConfig | None = None) -> UndirectedGraph:
    """Construct an empty graph using config (defaults when None)."""
    if config is None:
        config = GraphConfig()
    return UndirectedGraph(insertion_mode=config.insertion_mode)
