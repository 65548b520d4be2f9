from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True, order=True)
class VersionInfo:
    """File format version from the [VERSION] section."""
    major: int
    minor: int
    revision: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.revision)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.revision}"


@dataclass(frozen=True)
class Definitions:
    """
    Raster times and total duration from the [DEFINITIONS] section.

    Notes
    - Values are stored as written in the file (seconds in practice, not checked).
    - extra holds any raw tokens following the five known label/value pairs,
      untouched (e.g. 'Name', 'FOV' entries written by some exporters).
    """
    AdcRasterTime: float
    BlockDurationRaster: float
    GradientRasterTime: float
    RadiofrequencyRasterTime: float
    TotalDuration: float
    extra: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Block:
    """
    One row of [BLOCKS].

    dur is the duration in units of BlockDurationRaster. All other fields are
    1-based indices into the matching event collection; 0 means the block has
    no event of that kind.
    """
    dur: int
    rf: int
    gx: int
    gy: int
    gz: int
    adc: int
    delay: int
    ext: int

    def has(self, kind: str) -> bool:
        """True if the block references an event of the given kind (e.g. 'rf', 'gx')."""
        if kind == "dur":
            raise ValueError("'dur' is a duration, not an event reference.")
        if kind not in {f.name for f in fields(self)}:
            raise ValueError(f"Unknown event kind '{kind}'.")
        return getattr(self, kind) != 0


@dataclass(frozen=True)
class RFEvent:
    """
    One row of [RF].

    mag_id, phase_id and time_shape_id reference shapes by 1-based position.
    """
    amplitude: float
    mag_id: int
    phase_id: int
    time_shape_id: int
    delay: float
    freq: float
    phase: float


@dataclass(frozen=True)
class TrapEvent:
    amplitude: float
    rise: float
    flat: float
    fall: float
    delay: float


@dataclass(frozen=True)
class AdcEvent:
    num: int
    dwell: float
    delay: float
    freq: float
    phase: float


@dataclass(frozen=True)
class Extension:
    """One row of [EXTENSIONS]; next_id == 0 terminates a chain."""
    type: int
    ref: int
    next_id: int
