"""Effective density of the data an action touches.

An action gated on several data spaces is only performed when all of them are
present, so their average densities multiply.
"""

from typing import Mapping, Optional, Sequence

from accelgate.frontend.gating import ALL_DATA_SPACES, DataSpaceGating, FullyGated, GatedAction
from accelgate.frontend.workload import DataSpaces
from accelgate.model.types import CompoundDataMovement
from accelgate.util.exceptions import UnknownDataSpaceError


def _average_density(compound_data_movement: CompoundDataMovement, data_space_id: int) -> float:
    if not 0 <= data_space_id < len(compound_data_movement):
        raise UnknownDataSpaceError(
            f"No movement record for data space id {data_space_id}; "
            f"{len(compound_data_movement)} records given"
        )
    return compound_data_movement[data_space_id].average_density()


def resolve_density(
    gating: Optional[DataSpaceGating],
    action: GatedAction,
    compound_data_movement: CompoundDataMovement,
) -> float:
    """Average density of the data touched by ``action``.

    Parameters
    ----------
    gating : DataSpaceGating or None
        Gating of the data space or compute unit. None means nothing is gated.
    action : GatedAction
        The action to resolve.
    compound_data_movement : CompoundDataMovement
        Movement records indexed by data-space id; supplies tile densities.

    Returns
    -------
    float
        1.0 if the action is not gated, 0.0 if it is fully gated, else the
        product of the gating data spaces' average densities.
    """
    if gating is None:
        return 1.0
    gate = gating.get(action)
    if gate is None:
        return 1.0
    if isinstance(gate, FullyGated):
        return 0.0

    density = 1.0
    for data_space_id in gate.data_space_ids:
        density *= _average_density(compound_data_movement, data_space_id)
    return density


def density_by_gated_action_names(
    gating_by_action: Mapping[str, Sequence[str]],
    action_name: str,
    compound_data_movement: CompoundDataMovement,
    data_spaces: DataSpaces,
) -> float:
    """:func:`resolve_density` for an unresolved ``{action: [tensor names]}`` map.

    Raises :class:`~accelgate.util.exceptions.UnknownDataSpaceError` if a name is
    not a known data space.
    """
    if action_name not in gating_by_action:
        return 1.0
    names = list(gating_by_action[action_name])
    if names and names[0] == ALL_DATA_SPACES:
        return 0.0

    density = 1.0
    for name in names:
        density *= _average_density(compound_data_movement, data_spaces.name_to_id(name))
    return density
