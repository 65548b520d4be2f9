from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class Shape:
    """
    Waveform from the [SHAPES] section, possibly in compressed form.

    Notes
    - len(samples) < num_samples means the samples hold a run-length encoded
      derivative; see :func:`pulseq_reader.analysis.decompress.decode_shape`.
    - len(samples) == num_samples means the samples are already expanded.
    - samples is a read-only float64 array.
    """
    num_samples: int
    samples: np.ndarray
    shape_id: Optional[int] = None

    def __post_init__(self) -> None:
        arr = np.array(self.samples, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"Shape samples must be 1D, got shape {arr.shape}")
        if int(self.num_samples) < 0:
            raise ValueError(f"num_samples must be >= 0, got {self.num_samples}")
        if arr.size > int(self.num_samples):
            raise ValueError(
                f"Shape stores {arr.size} samples but declares num_samples={self.num_samples}"
            )
        arr.flags.writeable = False
        object.__setattr__(self, "num_samples", int(self.num_samples))
        object.__setattr__(self, "samples", arr)

    @property
    def is_compressed(self) -> bool:
        return self.samples.size < self.num_samples
