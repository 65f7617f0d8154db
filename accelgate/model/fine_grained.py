"""Split storage, metadata, and compute action counts into random and gated.

Each total action count ``T`` at a level is partitioned as::

    random = ceil(density * T)
    gated = T - random

where ``density`` is the effective density of the data the action touches (see
:mod:`accelgate.model.density`). Ceiling keeps the costed (random) share from
being under-counted. Updates are never gated. Metadata accesses ride on the
same reads and fills as the data they describe, gated by the metadata actions'
own densities.

All functions here write into the records' ``fine_grained_accesses`` in place.
Running them again with the same inputs writes the same values.
"""

import logging
import math
from typing import Optional

from accelgate.frontend.gating import ComputeGating, GatedAction, LevelGating
from accelgate.frontend.workload import DataSpaces
from accelgate.model.density import resolve_density
from accelgate.model.types import CompoundDataMovement, ComputeRecord
from accelgate.util.exceptions import EvaluationError


def split_random_gated(total: int, density: float) -> tuple[int, int]:
    """Partition ``total`` into ``(random, gated)`` by ``density``."""
    n_random = math.ceil(density * total)
    return n_random, total - n_random


def _densities(
    level_gating: Optional[LevelGating],
    data_space_id: int,
    read_action: GatedAction,
    write_action: GatedAction,
    compound_data_movement: CompoundDataMovement,
) -> tuple[float, float]:
    gating = level_gating.get(data_space_id) if level_gating is not None else None
    if gating is None:
        # No gating for this data space at all
        return 1.0, 1.0
    return (
        resolve_density(gating, read_action, compound_data_movement),
        resolve_density(gating, write_action, compound_data_movement),
    )


def compute_fine_grained_data_movement_accesses(
    compound_data_movement: CompoundDataMovement,
    level_gating: Optional[LevelGating],
    data_spaces: DataSpaces,
) -> None:
    """Populate random/gated read, fill, and update counts for one storage level.

    Afterwards, metadata counts are populated by
    :func:`compute_fine_grained_metadata_accesses`.

    Parameters
    ----------
    compound_data_movement : CompoundDataMovement
        Movement records of the level, indexed by data-space id.
    level_gating : LevelGating or None
        Gating at this level. None means nothing is gated.
    data_spaces : DataSpaces
        The workload's data-space registry.
    """
    for data_space_id in data_spaces.ids():
        try:
            read_density, write_density = _densities(
                level_gating,
                data_space_id,
                GatedAction.READ,
                GatedAction.WRITE,
                compound_data_movement,
            )
        except EvaluationError as e:
            e.add_field(data_spaces.id_to_name(data_space_id))
            raise

        record = compound_data_movement[data_space_id]
        fine_grained = record.fine_grained_accesses

        random_reads, gated_reads = split_random_gated(record.reads, read_density)
        fine_grained["random_read"] = random_reads
        fine_grained["gated_read"] = gated_reads

        random_fills, gated_fills = split_random_gated(record.fills, write_density)
        fine_grained["random_fill"] = random_fills
        fine_grained["gated_fill"] = gated_fills

        # Updates are read-modify-write and always performed
        fine_grained["random_update"] = record.updates
        fine_grained["gated_update"] = 0

        logging.debug(
            f"{data_spaces.id_to_name(data_space_id)}: read density {read_density}, "
            f"write density {write_density}, {gated_reads}/{record.reads} reads and "
            f"{gated_fills}/{record.fills} fills gated"
        )

    compute_fine_grained_metadata_accesses(compound_data_movement, level_gating, data_spaces)


def compute_fine_grained_metadata_accesses(
    compound_data_movement: CompoundDataMovement,
    level_gating: Optional[LevelGating],
    data_spaces: DataSpaces,
) -> None:
    """Populate metadata read and fill counts for one storage level.

    Metadata reads and fills are taken from the data's ``reads`` and ``fills``,
    gated by the ``metadata_read`` and ``metadata_write`` actions.
    """
    for data_space_id in data_spaces.ids():
        try:
            metadata_read_density, metadata_write_density = _densities(
                level_gating,
                data_space_id,
                GatedAction.METADATA_READ,
                GatedAction.METADATA_WRITE,
                compound_data_movement,
            )
        except EvaluationError as e:
            e.add_field(data_spaces.id_to_name(data_space_id))
            raise

        record = compound_data_movement[data_space_id]
        fine_grained = record.fine_grained_accesses

        metadata_reads, gated_metadata_reads = split_random_gated(
            record.reads, metadata_read_density
        )
        fine_grained["metadata_read"] = metadata_reads
        fine_grained["gated_metadata_read"] = gated_metadata_reads

        metadata_fills, gated_metadata_fills = split_random_gated(
            record.fills, metadata_write_density
        )
        fine_grained["metadata_fill"] = metadata_fills
        fine_grained["gated_metadata_fill"] = gated_metadata_fills


def compute_fine_grained_compute_accesses(
    compute: ComputeRecord,
    compute_gating: Optional[ComputeGating],
    compound_data_movement: CompoundDataMovement,
) -> None:
    """Populate random/gated compute counts for one compute unit.

    Compute is gated by the densities of its operands, looked up in
    ``compound_data_movement``. The total is scaled by the replication factor.
    """
    density = resolve_density(compute_gating, GatedAction.COMPUTE, compound_data_movement)
    random_computes, gated_computes = split_random_gated(compute.total_accesses, density)
    compute.fine_grained_accesses["random_compute"] = random_computes
    compute.fine_grained_accesses["gated_compute"] = gated_computes
