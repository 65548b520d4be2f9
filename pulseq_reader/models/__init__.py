"""Data models for parsed sequence files.

All models are frozen dataclasses; they are built once by the ingest layer and
never mutated afterwards.
"""
from .events import AdcEvent, Block, Definitions, Extension, RFEvent, TrapEvent, VersionInfo
from .sequence import SequenceDocument
from .shapes import Shape

__all__ = [
    "AdcEvent",
    "Block",
    "Definitions",
    "Extension",
    "RFEvent",
    "SequenceDocument",
    "Shape",
    "TrapEvent",
    "VersionInfo",
]
