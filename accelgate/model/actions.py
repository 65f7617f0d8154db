import math

from accelgate.model.main import Evaluation
from accelgate.util._base_analysis_types import (
    ActionCount,
    ActionKey,
    VerboseActionKey,
)


def _emit(
    actions: dict[ActionKey, ActionCount],
    key: ActionKey,
    total: int,
    max_per_unit: int,
) -> None:
    if key not in actions:
        actions[key] = ActionCount.default()
    actions[key].total += total
    actions[key].max_per_unit += max_per_unit


def gather_fine_grained_actions(
    evaluation: Evaluation,
    verbose: bool = False,
) -> dict[ActionKey | VerboseActionKey, ActionCount]:
    """Collect populated fine-grained accesses into an action table.

    Keys are ``ActionKey(level, label)``, summed over data spaces. With
    ``verbose``, keys are ``VerboseActionKey(level, label, tensor)``; compute keys
    have no tensor. Compute ``max_per_unit`` is the count per replicated unit.
    """
    actions: dict[ActionKey | VerboseActionKey, ActionCount] = {}
    data_spaces = evaluation.data_spaces

    for level in evaluation.storage_levels:
        for data_space_id, record in enumerate(level.data_movement):
            for label, count in record.fine_grained_accesses.items():
                if verbose:
                    tensor = data_spaces.id_to_name(data_space_id)
                    key = VerboseActionKey(level.name, label, tensor)
                else:
                    key = ActionKey(level.name, label)
                _emit(actions, key, count, count)

    for unit in evaluation.compute_units:
        replication = unit.compute.replication_factor
        for label, count in unit.compute.fine_grained_accesses.items():
            if verbose:
                key = VerboseActionKey(unit.name, label, None)
            else:
                key = ActionKey(unit.name, label)
            _emit(actions, key, count, math.ceil(count / replication))

    return actions
