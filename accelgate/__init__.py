from __future__ import annotations

from accelgate._version import __version__
from accelgate.frontend import config
from accelgate.frontend import gating
from accelgate.frontend import workload
import accelgate.model as model
from accelgate.util import set_n_parallel_jobs
from accelgate.util.exceptions import (
    EvaluationError,
    UnknownComponentTypeError,
    UnknownDataSpaceError,
)

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
from accelgate.model.main import ComputeUnit, Evaluation, StorageLevel, evaluate, evaluate_many
from accelgate.model.actions import gather_fine_grained_actions
from accelgate.model.types import ComputeRecord, DataMovementRecord

__all__ = [
    # Submodules
    "config",
    "gating",
    "model",
    "workload",
    # Main classes
    "ComputeGating",
    "ComputeRecord",
    "ComputeUnit",
    "Config",
    "DataMovementRecord",
    "DataSpaceGating",
    "DataSpaces",
    "Evaluation",
    "FullyGated",
    "GatedAction",
    "GatedOn",
    "LevelGating",
    "StorageLevel",
    # Functions
    "evaluate",
    "evaluate_many",
    "gather_fine_grained_actions",
    # Utilities
    "set_n_parallel_jobs",
    "EvaluationError",
    "UnknownComponentTypeError",
    "UnknownDataSpaceError",
    "__version__",
]
