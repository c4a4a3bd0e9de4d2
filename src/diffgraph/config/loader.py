from __future__ import annotations

import logging
from typing import Any

from dynaconf import Dynaconf

from diffgraph.config.constants import DEFAULTS
from diffgraph.config.settings import GraphConfig


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="DIFFGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def load_graph_config(**overrides: Any) -> GraphConfig:
    """
    Build a GraphConfig from DIFFGRAPH_* environment settings.

    Keyword overrides take precedence over the environment, which takes
    precedence over DEFAULTS.
    """

    settings = _settings()

    def _get(name: str) -> Any:
        if name.lower() in overrides:
            return overrides.pop(name.lower())
        return settings.get(name, DEFAULTS[name])

    config = GraphConfig(
        reconnect_on_remove=bool(_get("RECONNECT_ON_REMOVE")),
        strict_edge_removal=bool(_get("STRICT_EDGE_REMOVAL")),
        log_rejections=bool(_get("LOG_REJECTIONS")),
        rejection_log_level=str(_get("REJECTION_LOG_LEVEL")),
    )

    if overrides:
        raise ValueError(f"unknown config options: {sorted(overrides)}")

    logging.getLogger("diffgraph.config").debug("loaded %s", config)
    return config
