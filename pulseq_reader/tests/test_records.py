from __future__ import annotations

"""Tests for the fixed-column record decoders."""

import pytest

from pulseq_reader.errors import RecordParseError
from pulseq_reader.ingest.records import (
    decode_definitions,
    decode_record,
    decode_section,
    decode_version,
)
from pulseq_reader.models.events import (
    AdcEvent,
    Block,
    Definitions,
    Extension,
    RFEvent,
    TrapEvent,
    VersionInfo,
)


def test_decode_version() -> None:
    v = decode_version("major 1 minor 4 revision 2")
    assert v == VersionInfo(1, 4, 2)
    assert v.as_tuple() == (1, 4, 2)
    assert str(v) == "1.4.2"


def test_version_ordering() -> None:
    assert VersionInfo(1, 3, 9) < VersionInfo(1, 4, 0)
    assert VersionInfo(1, 4, 2) >= VersionInfo(1, 4, 0)


@pytest.mark.parametrize(
    "text",
    [
        "major 1 minor 4",
        "major 1 minor 4 revision two",
        "major 1 minor 4 revision 2 extra 3",
        "major -1 minor 4 revision 2",
    ],
)
def test_decode_version_rejects(text: str) -> None:
    with pytest.raises(RecordParseError) as exc:
        decode_version(text)
    assert exc.value.section == "VERSION"
    assert exc.value.line == text


def test_decode_definitions_positional() -> None:
    text = (
        "AdcRasterTime 1e-07 BlockDurationRaster 1e-05 GradientRasterTime 1e-05 "
        "RadiofrequencyRasterTime 1e-06 TotalDuration 2.5"
    )
    d = decode_definitions(text)
    assert d == Definitions(1e-07, 1e-05, 1e-05, 1e-06, 2.5)
    assert d.extra == ()


def test_decode_definitions_keeps_trailing_tokens() -> None:
    text = (
        "AdcRasterTime 1e-07 BlockDurationRaster 1e-05 GradientRasterTime 1e-05 "
        "RadiofrequencyRasterTime 1e-06 TotalDuration 2.5 FOV 0.2 0.2 0.003"
    )
    d = decode_definitions(text)
    assert d.TotalDuration == 2.5
    assert d.extra == ("FOV", "0.2", "0.2", "0.003")


def test_decode_definitions_too_short() -> None:
    with pytest.raises(RecordParseError) as exc:
        decode_definitions("AdcRasterTime 1e-07 BlockDurationRaster 1e-05")
    assert exc.value.section == "DEFINITIONS"


@pytest.mark.parametrize(
    "section, line, expected",
    [
        ("BLOCKS", "1 100 1 0 1 0 1 0 0", Block(100, 1, 0, 1, 0, 1, 0, 0)),
        ("RF", "1 2500 1 2 0 100 0 0", RFEvent(2500.0, 1, 2, 0, 100.0, 0.0, 0.0)),
        ("TRAP", "3 1e5 10 100 10 0", TrapEvent(1e5, 10.0, 100.0, 10.0, 0.0)),
        ("ADC", "1 64 10000 20 0 0", AdcEvent(64, 10000.0, 20.0, 0.0, 0.0)),
        ("EXTENSIONS", "1 1 3 0", Extension(1, 3, 0)),
    ],
)
def test_decode_record(section: str, line: str, expected: object) -> None:
    assert decode_record(section, line) == expected


def test_decode_record_preserves_types() -> None:
    rf = decode_record("RF", "1 2500 1 2 0 100 0 0")
    assert isinstance(rf.amplitude, float)
    assert isinstance(rf.mag_id, int)
    adc = decode_record("ADC", "1 64 10000 20 0 0")
    assert isinstance(adc.num, int)
    assert isinstance(adc.dwell, float)


def test_block_zero_means_absent() -> None:
    b = decode_record("BLOCKS", "7 5 0 0 0 3 0 0 0")
    assert b.rf == 0 and not b.has("rf")
    assert b.gz == 3 and b.has("gz")
    with pytest.raises(ValueError):
        b.has("dur")
    with pytest.raises(ValueError):
        b.has("foo")


@pytest.mark.parametrize(
    "section, line",
    [
        ("BLOCKS", "1 100 1 0 1 0 1 0"),          # missing trailing column
        ("BLOCKS", "1 100 1 0 1 0 1 0 0 0"),      # extra column
        ("BLOCKS", "1 100 1.5 0 1 0 1 0 0"),      # float in integer column
        ("BLOCKS", "x 100 1 0 1 0 1 0 0"),        # non-integer record index
        ("TRAP", "1 abc 10 100 10 0"),
        ("RF", ""),
    ],
)
def test_decode_record_rejects(section: str, line: str) -> None:
    with pytest.raises(RecordParseError) as exc:
        decode_record(section, line)
    assert exc.value.section == section
    assert exc.value.line == line
    assert section in str(exc.value)


def test_decode_record_unknown_section() -> None:
    with pytest.raises(KeyError):
        decode_record("DELAYS", "1 100")


def test_decode_section_preserves_order() -> None:
    lines = ("1 1 0 0", "2 2 0 1", "3 1 5 0")
    exts = decode_section("EXTENSIONS", lines)
    assert [e.type for e in exts] == [1, 2, 1]
    assert exts[1].next_id == 1
