from __future__ import annotations

from typing import List, Tuple

import numpy as np

from pulseq_reader.errors import ShapeDecodeError
from pulseq_reader.models.shapes import Shape


def _expand_runs(packed: np.ndarray, num_samples: int) -> Tuple[np.ndarray, np.ndarray, int, int]:
    """
    Split a packed derivative stream into
    (step values, repeat counts, values consumed, steps beyond num_samples).

    Two equal consecutive values ``v v n`` stand for ``n + 2`` steps of ``v``;
    any other value is a single step. Reading stops once num_samples steps are
    covered or the stream is exhausted. Counts are capped at the samples still
    missing, so the returned counts never sum past num_samples.
    """
    steps: List[float] = []
    counts: List[int] = []
    i = 0
    produced = 0
    overshoot = 0
    n_packed = packed.size
    while i < n_packed and produced < num_samples:
        v = packed[i]
        if i + 1 < n_packed and packed[i + 1] == v:
            if i + 2 >= n_packed:
                raise ShapeDecodeError(f"run marker at position {i} has no repeat count")
            c = packed[i + 2]
            if not np.isfinite(c) or c < 0 or c != np.floor(c):
                raise ShapeDecodeError(f"invalid repeat count {c!r} at position {i + 2}")
            reps = int(c) + 2
            i += 3
        else:
            reps = 1
            i += 1
        remaining = num_samples - produced
        if reps > remaining:
            overshoot += reps - remaining
            reps = remaining
        steps.append(float(v))
        counts.append(reps)
        produced += reps
    return np.asarray(steps, dtype=np.float64), np.asarray(counts, dtype=np.int64), i, overshoot


def decode_shape(shape: Shape, strict: bool = True) -> Shape:
    """
    Expand a run-length compressed shape to its declared number of samples.

    Parameters
    ----------
    shape:
        Shape as read from the file. If ``len(samples) == num_samples`` it is
        already expanded and is returned unchanged.
    strict:
        If True, the packed stream must expand to exactly num_samples values
        with nothing left over, otherwise ShapeDecodeError is raised.
        If False, an overlong expansion is truncated at num_samples and a short
        one leaves the remaining samples at zero.

    Returns
    -------
    Shape
        Shape with ``len(samples) == num_samples`` and the same shape_id.

    Notes
    -----
    The packed values are first differences of the waveform, with the first
    value taken as the step from zero. The waveform is recovered as the
    cumulative sum of the expanded step sequence.
    """
    n = shape.num_samples
    packed = shape.samples
    if packed.size == n:
        return shape

    steps, counts, consumed, overshoot = _expand_runs(packed, n)
    produced = int(counts.sum()) + overshoot

    if strict:
        if produced != n:
            raise ShapeDecodeError(
                f"shape {shape.shape_id}: packed data expands to {produced} samples, expected {n}"
            )
        if consumed != packed.size:
            raise ShapeDecodeError(
                f"shape {shape.shape_id}: {packed.size - consumed} packed value(s) left after {n} samples"
            )

    derivative = np.repeat(steps, counts)
    decoded = np.zeros(n, dtype=np.float64)
    decoded[: derivative.size] = np.cumsum(derivative)
    return Shape(num_samples=n, samples=decoded, shape_id=shape.shape_id)
