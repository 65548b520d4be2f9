"""Pulseq Reader -- typed, in-memory access to Pulseq sequence description files.

A sequence file is a line-oriented text format made of bracketed sections
([VERSION], [DEFINITIONS], [BLOCKS], [RF], [TRAP], [ADC], [EXTENSIONS],
[SHAPES], [SIGNATURE]). This package provides tools for:
- Locating sections and dropping blank/comment lines
- Decoding each section's fixed-column records into frozen dataclasses
- Splitting the SHAPES section into shapes and expanding compressed shapes
- Columnar (pandas) views of record collections

Key principles:
- Faithful transcription: no physical validation, no cross-reference checks
- Fail fast: the first malformed section or line aborts the parse
- Immutable results: parsed models are never modified

Main subpackages:
- ingest: Section extraction, record decoding, SequenceReader
- models: Data models (SequenceDocument, Block, RFEvent, Shape, ...)
- analysis: Shape decompression
"""

from .analysis import decode_shape
from .errors import (
    MalformedSection,
    PulseqFormatError,
    RecordParseError,
    SectionNotFound,
    ShapeDecodeError,
)
from .ingest import SequenceReader, SequenceReaderConfig, parse_sequence, read_pulseq
from .models import SequenceDocument, Shape

__all__ = [
    "MalformedSection",
    "PulseqFormatError",
    "RecordParseError",
    "SectionNotFound",
    "SequenceDocument",
    "SequenceReader",
    "SequenceReaderConfig",
    "Shape",
    "ShapeDecodeError",
    "decode_shape",
    "parse_sequence",
    "read_pulseq",
]
