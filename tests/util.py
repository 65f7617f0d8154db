from accelgate.frontend.gating import ComputeGating, LevelGating
from accelgate.frontend.workload import DataSpaces
from accelgate.model.main import ComputeUnit, Evaluation, StorageLevel
from accelgate.model.types import ComputeRecord, DataMovementRecord

DATA_SPACES = DataSpaces(names=("Weights", "Inputs", "Outputs"))


def make_evaluation(weights_density=0.5, inputs_density=0.4) -> Evaluation:
    """DRAM -> Buffer -> MAC. Buffer gates Weights reads on Inputs and Outputs
    fills on Weights and Inputs; MAC is gated on Weights and Inputs."""

    def movement(reads, fills, updates):
        return [
            DataMovementRecord(reads=reads, fills=fills, tile_density=weights_density),
            DataMovementRecord(reads=reads, fills=fills, tile_density=inputs_density),
            DataMovementRecord(reads=reads, fills=fills, updates=updates, tile_density=1.0),
        ]

    return Evaluation(
        data_spaces=DATA_SPACES,
        storage_levels=[
            StorageLevel("DRAM", movement(100, 0, 0)),
            StorageLevel(
                "Buffer",
                movement(10, 10, 10),
                LevelGating.from_names(
                    {
                        "Weights": {"read": ["Inputs"], "metadata_read": ["Inputs"]},
                        "Outputs": {"write": ["Weights", "Inputs"]},
                    },
                    DATA_SPACES,
                ),
            ),
        ],
        compute_units=[
            ComputeUnit(
                "MAC",
                ComputeRecord(replication_factor=4, accesses=5),
                ComputeGating.from_names({"compute": ["Weights", "Inputs"]}, DATA_SPACES),
            )
        ],
    )
