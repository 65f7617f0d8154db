from accelgate.model.density import density_by_gated_action_names, resolve_density
from accelgate.model.fine_grained import (
    compute_fine_grained_compute_accesses,
    compute_fine_grained_data_movement_accesses,
    compute_fine_grained_metadata_accesses,
)
from accelgate.model.main import ComputeUnit, Evaluation, StorageLevel, evaluate, evaluate_many
from accelgate.model.operation_types import get_num_op_types, get_operation_types
from accelgate.model.types import CompoundDataMovement, ComputeRecord, DataMovementRecord

__all__ = [
    "resolve_density",
    "density_by_gated_action_names",
    "compute_fine_grained_data_movement_accesses",
    "compute_fine_grained_metadata_accesses",
    "compute_fine_grained_compute_accesses",
    "get_num_op_types",
    "get_operation_types",
    "CompoundDataMovement",
    "ComputeRecord",
    "DataMovementRecord",
    "ComputeUnit",
    "Evaluation",
    "StorageLevel",
    "evaluate",
    "evaluate_many",
]
