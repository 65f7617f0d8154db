"""Action gating specification.

Describes which data spaces' sparsity gates which action at a storage level or
compute unit. Gating lists are given by tensor name and resolved to data-space
ids once, when the specification is built, so accounting never looks names up.

Example (tensor names, as a gating configuration source would provide them)::

    data_spaces = DataSpaces(names=("Weights", "Inputs", "Outputs"))

    level = LevelGating.from_names(
        {
            "Weights": {"read": ["Inputs"], "metadata_read": ["Inputs"]},
            "Outputs": {"write": ["all"]},
        },
        data_spaces,
    )
    compute = ComputeGating.from_names({"compute": ["Weights", "Inputs"]}, data_spaces)
"""

import logging
from enum import Enum
from typing import Annotated, ClassVar, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from accelgate.frontend.workload import DataSpaces
from accelgate.util.exceptions import EvaluationError

ALL_DATA_SPACES = "all"
"""Tensor name that, leading a gating list, gates the action entirely. """


class GatedAction(str, Enum):
    """Actions whose count can be gated by data-space sparsity."""

    READ = "read"
    WRITE = "write"
    METADATA_READ = "metadata_read"
    METADATA_WRITE = "metadata_write"
    COMPUTE = "compute"


STORAGE_GATED_ACTIONS = frozenset(
    {
        GatedAction.READ,
        GatedAction.WRITE,
        GatedAction.METADATA_READ,
        GatedAction.METADATA_WRITE,
    }
)
COMPUTE_GATED_ACTIONS = frozenset({GatedAction.COMPUTE})


class FullyGated(BaseModel):
    """The action is always gated: its effective density is 0."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fully_gated"] = "fully_gated"


class GatedOn(BaseModel):
    """The action is gated by the joint sparsity of the listed data spaces."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["gated_on"] = "gated_on"

    data_space_ids: tuple[int, ...]
    """Ids of the gating data spaces, in configuration order. """


Gate = Annotated[Union[FullyGated, GatedOn], Field(discriminator="kind")]


def gate_from_names(names: Sequence[str], data_spaces: DataSpaces) -> FullyGated | GatedOn:
    """Resolve a list of tensor names into a gate.

    A list led by ``"all"`` is fully gated. Any other name must be a known data
    space, else :class:`~accelgate.util.exceptions.UnknownDataSpaceError` is
    raised.
    """
    names = list(names)
    if names and names[0] == ALL_DATA_SPACES:
        if len(names) > 1:
            logging.warning(
                f"Gating list {names} starts with {ALL_DATA_SPACES!r}; ignoring the "
                f"remaining names."
            )
        return FullyGated()
    return GatedOn(data_space_ids=tuple(data_spaces.name_to_id(n) for n in names))


class DataSpaceGating(BaseModel):
    """Gating of the actions on one data space at one storage level."""

    model_config = ConfigDict(frozen=True)

    allowed_actions: ClassVar[frozenset[GatedAction]] = STORAGE_GATED_ACTIONS

    actions: dict[GatedAction, Gate] = {}
    """Gate per action. Actions that are absent are not gated. """

    @field_validator("actions")
    @classmethod
    def _check_actions(cls, actions: dict) -> dict:
        for action in actions:
            if action not in cls.allowed_actions:
                raise ValueError(
                    f"Action {action.value!r} can not be gated here. Allowed actions: "
                    f"{sorted(a.value for a in cls.allowed_actions)}"
                )
        return actions

    def get(self, action: GatedAction) -> Optional[FullyGated | GatedOn]:
        return self.actions.get(GatedAction(action))

    def __contains__(self, action: GatedAction) -> bool:
        return GatedAction(action) in self.actions

    @classmethod
    def from_names(
        cls,
        names_by_action: Mapping[str, Sequence[str]],
        data_spaces: DataSpaces,
    ) -> "DataSpaceGating":
        """Build from ``{action name: [tensor names]}``."""
        actions = {}
        for action_name, names in names_by_action.items():
            try:
                action = GatedAction(action_name)
            except ValueError:
                raise EvaluationError(
                    f"Unknown gated action {action_name!r}. Known actions: "
                    f"{[a.value for a in GatedAction]}"
                ) from None
            try:
                actions[action] = gate_from_names(names, data_spaces)
            except EvaluationError as e:
                e.add_field(action_name)
                raise
        return cls(actions=actions)


class ComputeGating(DataSpaceGating):
    """Gating of the ``compute`` action of one compute unit."""

    allowed_actions: ClassVar[frozenset[GatedAction]] = COMPUTE_GATED_ACTIONS


class LevelGating(BaseModel):
    """Gating of every data space at one storage level."""

    model_config = ConfigDict(frozen=True)

    data_spaces: dict[int, DataSpaceGating] = {}
    """Gating per data-space id. Data spaces that are absent are not gated at
    this level. """

    def get(self, data_space_id: int) -> Optional[DataSpaceGating]:
        return self.data_spaces.get(data_space_id)

    def __contains__(self, data_space_id: int) -> bool:
        return data_space_id in self.data_spaces

    @classmethod
    def from_names(
        cls,
        gating_by_tensor: Mapping[str, Mapping[str, Sequence[str]]],
        data_spaces: DataSpaces,
    ) -> "LevelGating":
        """Build from ``{tensor name: {action name: [tensor names]}}``."""
        gating = {}
        for tensor_name, names_by_action in gating_by_tensor.items():
            try:
                data_space_id = data_spaces.name_to_id(tensor_name)
                gating[data_space_id] = DataSpaceGating.from_names(
                    names_by_action, data_spaces
                )
            except EvaluationError as e:
                e.add_field(tensor_name)
                raise
        return cls(data_spaces=gating)
