"""Data-space registry.

Data spaces (tensors) are numbered by their position in the workload. Every
accounting operation takes the registry explicitly, so ids and names stay
consistent across one evaluation.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from accelgate.util.exceptions import UnknownDataSpaceError


class DataSpaces(BaseModel):
    """Ordered, immutable list of the data spaces of a workload.

    Example::

        data_spaces = DataSpaces(names=("Weights", "Inputs", "Outputs"))
        data_spaces.name_to_id("Inputs")  # 1
    """

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...]
    """Data-space names in canonical order. A data space's id is its index. """

    @field_validator("names")
    @classmethod
    def _check_unique(cls, names: tuple[str, ...]) -> tuple[str, ...]:
        seen = set()
        for n in names:
            if n in seen:
                raise ValueError(f"Duplicate data space name {n!r}")
            seen.add(n)
        return names

    @property
    def num_data_spaces(self) -> int:
        return len(self.names)

    def name_to_id(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise UnknownDataSpaceError(
                f"{name!r} is not a known data space. Known data spaces: "
                f"{list(self.names)}"
            ) from None

    def id_to_name(self, data_space_id: int) -> str:
        if not 0 <= data_space_id < len(self.names):
            raise UnknownDataSpaceError(
                f"Data space id {data_space_id} is out of range for "
                f"{len(self.names)} data spaces"
            )
        return self.names[data_space_id]

    def ids(self) -> range:
        return range(len(self.names))

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: str) -> bool:
        return name in self.names
