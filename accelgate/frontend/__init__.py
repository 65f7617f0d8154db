"""Inputs to fine-grained accounting: data spaces, gating, and configuration."""

import accelgate.frontend.config as config
import accelgate.frontend.gating as gating
import accelgate.frontend.workload as workload
from accelgate.frontend.config import Config
from accelgate.frontend.gating import (
    ComputeGating,
    DataSpaceGating,
    FullyGated,
    GatedAction,
    GatedOn,
    LevelGating,
)
from accelgate.frontend.workload import DataSpaces

__all__ = [
    "config",
    "gating",
    "workload",
    "ComputeGating",
    "Config",
    "DataSpaceGating",
    "DataSpaces",
    "FullyGated",
    "GatedAction",
    "GatedOn",
    "LevelGating",
]
