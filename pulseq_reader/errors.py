"""Exception taxonomy for sequence-file parsing.

Every error is fatal for the parse that raised it: nothing in this package
catches them, and no partial document is ever returned.
"""

from __future__ import annotations


class PulseqFormatError(ValueError):
    """Base class for all malformed-input errors."""


class SectionNotFound(PulseqFormatError):
    """A required ``[NAME]`` section marker is absent."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Section [{section}] not found in sequence file.")


class MalformedSection(PulseqFormatError):
    """The end of a section cannot be determined (no following ``[`` marker)."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Section [{section}] is not terminated by a following section marker.")


class RecordParseError(PulseqFormatError):
    """
    A line does not match its section's column layout.

    Attributes
    ----------
    section:
        Section name (e.g. ``"BLOCKS"``).
    line:
        Offending line content, exactly as extracted.
    reason:
        Short description of the mismatch.
    """

    def __init__(self, section: str, line: str, reason: str):
        self.section = section
        self.line = line
        self.reason = reason
        super().__init__(f"[{section}] {reason}: {line!r}")


class ShapeDecodeError(PulseqFormatError):
    """A compressed shape stream cannot be expanded to its declared sample count."""
