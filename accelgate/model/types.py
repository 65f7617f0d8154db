"""Records that fine-grained accounting reads totals from and writes into."""

from dataclasses import dataclass, field
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class TileDensity(Protocol):
    """Anything that can report a tile's average density."""

    def get_average_density(self) -> float: ...


@dataclass
class DataMovementRecord:
    """Aggregate movement of one data space at one storage level."""

    reads: int = 0
    fills: int = 0
    updates: int = 0
    tile_density: Union[float, TileDensity] = 1.0
    """Average density of the tile, or a provider computed upstream. """

    fine_grained_accesses: dict[str, int] = field(default_factory=dict)
    """Random/gated sub-counts, keyed by label. Written by accounting. """

    def average_density(self) -> float:
        if isinstance(self.tile_density, TileDensity):
            return self.tile_density.get_average_density()
        return float(self.tile_density)


CompoundDataMovement = list[DataMovementRecord]
"""Movement records of one storage level, indexed by data-space id."""


@dataclass
class ComputeRecord:
    """Accesses of one (possibly replicated) compute unit."""

    replication_factor: int = 1
    accesses: int = 0
    fine_grained_accesses: dict[str, int] = field(default_factory=dict)

    @property
    def total_accesses(self) -> int:
        return self.replication_factor * self.accesses
