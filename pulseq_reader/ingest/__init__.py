"""Ingest package - section extraction and record decoding.

This package handles:
- Classifying blank/comment lines and locating [NAME] sections
- Decoding the fixed-column sections (BLOCKS, RF, TRAP, ADC, EXTENSIONS)
- Decoding the VERSION/DEFINITIONS label-value records
- Splitting the SHAPES section into individual shapes

Key classes:
- SequenceReader: assembles a SequenceDocument from text lines or a file

Design principle:
- Files are transcribed as written; nothing is validated beyond the layout
- Shapes are kept compressed; expansion lives in pulseq_reader.analysis
"""
from .reader import SequenceReader, SequenceReaderConfig, parse_sequence, read_pulseq
from .sections import extract_section, is_skippable, locate_section

__all__ = [
    "SequenceReader",
    "SequenceReaderConfig",
    "extract_section",
    "is_skippable",
    "locate_section",
    "parse_sequence",
    "read_pulseq",
]
