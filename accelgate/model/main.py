"""Run fine-grained accounting over every storage level and compute unit of an
architecture/mapping evaluation."""

import copy as _copy
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from accelgate.frontend.gating import ComputeGating, LevelGating
from accelgate.frontend.workload import DataSpaces
from accelgate.model.fine_grained import (
    compute_fine_grained_compute_accesses,
    compute_fine_grained_data_movement_accesses,
)
from accelgate.model.types import CompoundDataMovement, ComputeRecord
from accelgate.util import delayed, parallel
from accelgate.util.exceptions import EvaluationError


@dataclass
class StorageLevel:
    name: str
    data_movement: CompoundDataMovement
    """Movement records indexed by data-space id. """
    gating: Optional[LevelGating] = None


@dataclass
class ComputeUnit:
    name: str
    compute: ComputeRecord
    gating: Optional[ComputeGating] = None
    density_level: Optional[str] = None
    """Storage level whose tile densities gate compute. None uses the innermost
    (last) storage level. """


@dataclass
class Evaluation:
    """Records of one architecture/mapping evaluation.

    Storage levels are ordered outermost first.
    """

    data_spaces: DataSpaces
    storage_levels: list[StorageLevel] = field(default_factory=list)
    compute_units: list[ComputeUnit] = field(default_factory=list)

    def find_level(self, name: str) -> StorageLevel:
        for level in self.storage_levels:
            if level.name == name:
                return level
        raise EvaluationError(
            f"Storage level {name!r} not found. Levels: "
            f"{[l.name for l in self.storage_levels]}"
        )

    def _density_source(self, unit: ComputeUnit) -> CompoundDataMovement:
        if unit.density_level is not None:
            return self.find_level(unit.density_level).data_movement
        if self.storage_levels:
            return self.storage_levels[-1].data_movement
        return []


def evaluate(evaluation: Evaluation, copy: bool = True) -> Evaluation:
    """Populate the fine-grained accesses of every record in ``evaluation``.

    Parameters
    ----------
    evaluation : Evaluation
        The records to account.
    copy : bool
        If True, work on a deep copy and leave ``evaluation`` untouched.

    Returns
    -------
    Evaluation
        The evaluation with populated ``fine_grained_accesses``.
    """
    if copy:
        evaluation = _copy.deepcopy(evaluation)
    data_spaces = evaluation.data_spaces

    for level in evaluation.storage_levels:
        try:
            if len(level.data_movement) != data_spaces.num_data_spaces:
                raise EvaluationError(
                    f"Expected {data_spaces.num_data_spaces} movement records, one "
                    f"per data space, got {len(level.data_movement)}"
                )
            compute_fine_grained_data_movement_accesses(
                level.data_movement, level.gating, data_spaces
            )
        except EvaluationError as e:
            e.add_field(level.name)
            raise
        logging.info(
            f"{level.name}: "
            f"{sum(r.fine_grained_accesses['gated_read'] for r in level.data_movement)} "
            f"gated reads, "
            f"{sum(r.fine_grained_accesses['gated_fill'] for r in level.data_movement)} "
            f"gated fills"
        )

    for unit in evaluation.compute_units:
        try:
            compute_fine_grained_compute_accesses(
                unit.compute, unit.gating, evaluation._density_source(unit)
            )
        except EvaluationError as e:
            e.add_field(unit.name)
            raise
        logging.info(
            f"{unit.name}: {unit.compute.fine_grained_accesses['gated_compute']} of "
            f"{unit.compute.total_accesses} computes gated"
        )

    return evaluation


def evaluate_many(
    evaluations: Iterable[Evaluation],
    n_jobs: Optional[int] = None,
) -> list[Evaluation]:
    """Evaluate independent evaluations, possibly in parallel.

    Each evaluation is accounted on its own copy of its records. Results are in
    the order of ``evaluations``.
    """
    jobs = [delayed(evaluate)(e, copy=True) for e in evaluations]
    return parallel(jobs, n_jobs=n_jobs)
