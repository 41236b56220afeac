from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import logger

SPLIT_RULES = ("centroid", "median")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Tunables for tree construction and diagnostics.

    Attributes:
        split_rule: "centroid" splits each node at the mean of its points,
            "median" at the upper median of each axis.
        debug: enable DEBUG output on the package logger.
    """

    split_rule: str = "centroid"
    debug: bool = False

    def __post_init__(self):
        if self.split_rule not in SPLIT_RULES:
            raise ValueError(
                f"Invalid split_rule: {self.split_rule}. "
                f"Must be one of {SPLIT_RULES}"
            )


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    rule = env.get("LOCTREE_SPLIT_RULE", "").strip().lower() or "centroid"
    debug = env.get("LOCTREE_DEBUG", "").strip().lower() in _TRUE_VALUES
    return Settings(split_rule=rule, debug=debug)


def apply_settings(settings: Settings) -> None:
    logger.set_debug(settings.debug)
