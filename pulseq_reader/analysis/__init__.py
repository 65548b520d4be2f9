"""Analysis package - operations on parsed sequence data.

Design principle:
  - Ingest produces an immutable :class:`~pulseq_reader.models.sequence.SequenceDocument`
    with shapes kept exactly as stored in the file.
  - Analysis functions take models and return new models; nothing is modified in place.
"""

from .decompress import decode_shape

__all__ = [
    "decode_shape",
]
