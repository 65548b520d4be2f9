from __future__ import annotations

import logging
from typing import Sequence, Tuple, Union

from pulseq_reader.errors import MalformedSection, SectionNotFound

logger = logging.getLogger(__name__)

# Sections whose content is one logical record spread over several lines.
JOINED_SECTIONS = ("VERSION", "DEFINITIONS")

# The signature section always comes last and is never parsed.
TERMINAL_SECTION = "SIGNATURE"


def is_skippable(line: str) -> bool:
    """True for empty lines and '#' comment lines. No trimming is applied."""
    return line == "" or line.startswith("#")


def locate_section(lines: Sequence[str], name: str) -> Tuple[int, int]:
    """
    Return the half-open line range ``(start, stop)`` holding the body of [name].

    The body starts on the line after the first line containing '[name]' and
    stops before the next line (at or after start) containing '['.
    """
    marker = f"[{name}]"
    logger.debug("Parsing section: %s", name)

    header = next((i for i, line in enumerate(lines) if marker in line), None)
    if header is None:
        raise SectionNotFound(name)
    start = header + 1

    stop = next((i for i in range(start, len(lines)) if "[" in lines[i]), None)
    if stop is None:
        if name != TERMINAL_SECTION:
            raise MalformedSection(name)
        stop = len(lines)
    return start, stop


def extract_section(lines: Sequence[str], name: str) -> Union[str, Tuple[str, ...]]:
    """
    Extract the content lines of section [name], dropping empty and comment lines.

    VERSION and DEFINITIONS are returned as a single space-joined string; every
    other section is returned as a tuple with one string per record line.
    """
    start, stop = locate_section(lines, name)
    kept = tuple(line for line in lines[start:stop] if not is_skippable(line))
    if name in JOINED_SECTIONS:
        return " ".join(kept)
    return kept
