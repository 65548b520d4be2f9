"""Fixed-column record decoding for the tabular sections.

Each per-line section is described by a record class and the converter for
each stored column, in file order. The leading column of every line is the
record index; it must be an integer and is not kept (records are identified
by their position instead).

VERSION and DEFINITIONS are single logical records made of ``label value``
pairs; labels are skipped and only the values are kept, in fixed order.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from pulseq_reader.errors import RecordParseError
from pulseq_reader.models.events import (
    AdcEvent,
    Block,
    Definitions,
    Extension,
    RFEvent,
    TrapEvent,
    VersionInfo,
)


Converter = Callable[[str], object]

# section -> (record type, column converters after the index column)
RECORD_SCHEMAS: Dict[str, Tuple[type, Tuple[Converter, ...]]] = {
    "BLOCKS": (Block, (int, int, int, int, int, int, int, int)),
    "RF": (RFEvent, (float, int, int, int, float, float, float)),
    "TRAP": (TrapEvent, (float, float, float, float, float)),
    "ADC": (AdcEvent, (int, float, float, float, float)),
    "EXTENSIONS": (Extension, (int, int, int)),
}

_VERSION_PAIRS = 3
_DEFINITION_PAIRS = 5


def _convert(section: str, line: str, token: str, conv: Converter) -> object:
    try:
        return conv(token)
    except ValueError:
        raise RecordParseError(section, line, f"cannot convert {token!r} to {conv.__name__}") from None


def _pair_values(section: str, text: str, n_pairs: int, conv: Converter) -> Tuple[list, list]:
    """Split 'label value label value ...' and convert the first n_pairs values."""
    tokens = text.split()
    need = 2 * n_pairs
    if len(tokens) < need:
        raise RecordParseError(section, text, f"expected {need} tokens ({n_pairs} label/value pairs), got {len(tokens)}")
    values = [_convert(section, text, tok, conv) for tok in tokens[1:need:2]]
    return values, tokens[need:]


def decode_version(text: str) -> VersionInfo:
    """Decode the joined [VERSION] content, e.g. 'major 1 minor 4 revision 2'."""
    values, rest = _pair_values("VERSION", text, _VERSION_PAIRS, int)
    if rest:
        raise RecordParseError("VERSION", text, f"expected {2 * _VERSION_PAIRS} tokens, got {2 * _VERSION_PAIRS + len(rest)}")
    if any(v < 0 for v in values):
        raise RecordParseError("VERSION", text, "version numbers must be non-negative")
    return VersionInfo(*values)


def decode_definitions(text: str) -> Definitions:
    """
    Decode the joined [DEFINITIONS] content.

    The first five label/value pairs are read positionally as AdcRasterTime,
    BlockDurationRaster, GradientRasterTime, RadiofrequencyRasterTime and
    TotalDuration. Anything after them is kept verbatim in Definitions.extra.
    """
    values, rest = _pair_values("DEFINITIONS", text, _DEFINITION_PAIRS, float)
    return Definitions(*values, extra=tuple(rest))


def decode_record(section: str, line: str):
    """Decode one line of a per-line section into its record type."""
    if section not in RECORD_SCHEMAS:
        raise KeyError(f"Unknown record section: {section}")
    record_type, converters = RECORD_SCHEMAS[section]

    tokens = line.split()
    if len(tokens) != len(converters) + 1:
        raise RecordParseError(section, line, f"expected {len(converters) + 1} columns, got {len(tokens)}")

    # leading record index: validated, not stored
    _convert(section, line, tokens[0], int)
    values = [_convert(section, line, tok, conv) for tok, conv in zip(tokens[1:], converters)]
    return record_type(*values)


def decode_section(section: str, lines: Sequence[str]) -> tuple:
    """Decode every line of a per-line section, preserving order."""
    return tuple(decode_record(section, line) for line in lines)

