from __future__ import annotations

import logging
from dataclasses import dataclass

# ---------------------------------------------------------------------
# Graph mutation policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a DirectedGraph applies and reports mutations.
    """

    reconnect_on_remove: bool = True
    strict_edge_removal: bool = False
    log_rejections: bool = True
    rejection_log_level: str = "WARNING"

    def __post_init__(self) -> None:
        level = logging.getLevelName(str(self.rejection_log_level).upper())
        if not isinstance(level, int):
            raise ValueError(
                f"unknown rejection_log_level: {self.rejection_log_level!r}"
            )

    @property
    def log_level(self) -> int:
        return logging.getLevelName(str(self.rejection_log_level).upper())
