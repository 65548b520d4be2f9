from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from pulseq_reader.errors import RecordParseError
from pulseq_reader.models.shapes import Shape

logger = logging.getLogger(__name__)

_SECTION = "SHAPES"


def _header_int(line: str, label: str) -> int:
    """Parse the integer value of a 'label <int>' header line."""
    tokens = line.split()
    if not tokens or tokens[0] != label:
        raise RecordParseError(_SECTION, line, f"expected a '{label}' line")
    if len(tokens) < 2:
        raise RecordParseError(_SECTION, line, f"'{label}' line has no value")
    try:
        return int(tokens[1])
    except ValueError:
        raise RecordParseError(_SECTION, line, f"'{label}' value is not an integer") from None


def decode_shapes(lines: Sequence[str]) -> Tuple[Shape, ...]:
    """
    Decode the filtered [SHAPES] lines into shapes, in declaration order.

    Every line whose first token is 'shape_id' opens a shape. The next line
    must be 'num_samples <int>' and all lines up to the next 'shape_id' line
    (or the end of the section) are sample values, one float per line.

    Samples are kept as stored; compressed shapes are not expanded here.
    """
    starts = [i for i, line in enumerate(lines) if line.split()[:1] == ["shape_id"]]
    if starts and starts[0] > 0:
        logger.debug("Ignoring %d [SHAPES] line(s) before the first shape_id", starts[0])

    shapes: List[Shape] = []
    for k, p in enumerate(starts):
        shape_id = _header_int(lines[p], "shape_id")
        if p + 1 >= len(lines) or (k + 1 < len(starts) and p + 1 == starts[k + 1]):
            raise RecordParseError(_SECTION, lines[p], "shape has no 'num_samples' line")
        num_samples = _header_int(lines[p + 1], "num_samples")
        if num_samples < 0:
            raise RecordParseError(_SECTION, lines[p + 1], "'num_samples' must be >= 0")

        stop = starts[k + 1] if k + 1 < len(starts) else len(lines)
        samples = np.empty(stop - (p + 2), dtype=np.float64)
        for j, line in enumerate(lines[p + 2:stop]):
            try:
                samples[j] = float(line.strip())
            except ValueError:
                raise RecordParseError(_SECTION, line, f"shape {shape_id}: sample is not a number") from None

        if samples.size > num_samples:
            raise RecordParseError(
                _SECTION,
                lines[p + 1],
                f"shape {shape_id}: {samples.size} samples stored but num_samples={num_samples}",
            )
        shapes.append(Shape(num_samples=num_samples, samples=samples, shape_id=shape_id))

    return tuple(shapes)
