from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pulseq_reader.errors import SectionNotFound
from pulseq_reader.ingest.records import decode_definitions, decode_section, decode_version
from pulseq_reader.ingest.sections import extract_section
from pulseq_reader.ingest.shapes import decode_shapes
from pulseq_reader.models.events import VersionInfo
from pulseq_reader.models.sequence import SequenceDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceReaderConfig:
    """
    Reader configuration for sequence text files.

    min_version:
      Oldest format version the record layouts were written for. Older files are
      still parsed; a warning is logged and recorded on the document.
    optional_sections:
      Per-line sections (e.g. "EXTENSIONS", "TRAP") allowed to be absent. A missing
      optional section gives an empty collection; any other missing section raises
      SectionNotFound. VERSION and DEFINITIONS are always required.
    encoding:
      Text encoding used by read().
    """
    min_version: Tuple[int, int, int] = (1, 4, 0)
    optional_sections: Tuple[str, ...] = ()
    encoding: str = "utf-8"


class SequenceReader:
    """
    Parser for sequence description files.

    Contract:
      - Each section is located independently in the same line sequence.
      - Records are transcribed as written; cross references are not checked.
      - Shapes are kept in stored (possibly compressed) form.
      - The first error aborts the parse; no partial document is returned.
    """

    def __init__(self, config: Optional[SequenceReaderConfig] = None):
        self.config = config or SequenceReaderConfig()

    def read(self, file_path: str | Path) -> SequenceDocument:
        path = Path(file_path).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(str(path))
        logger.info("Reading sequence file %s", path)
        # split on newlines only, as readlines does
        lines = path.read_text(encoding=self.config.encoding).split("\n")
        return self.parse(lines, source_path=path)

    def parse(self, lines: Sequence[str], source_path: Optional[Path] = None) -> SequenceDocument:
        # line terminators only; content is never trimmed
        lines = [line.rstrip("\r\n") for line in lines]
        warnings: List[str] = []

        version = decode_version(extract_section(lines, "VERSION"))
        baseline = VersionInfo(*self.config.min_version)
        if version < baseline:
            msg = f"Sequence file version {version} is older than {baseline}; record layouts may not match."
            logger.warning("%s", msg)
            warnings.append(msg)

        definitions = decode_definitions(extract_section(lines, "DEFINITIONS"))
        blocks = self._records(lines, "BLOCKS")
        trap = self._records(lines, "TRAP")
        rf = self._records(lines, "RF")
        adc = self._records(lines, "ADC")
        extensions = self._records(lines, "EXTENSIONS")
        shapes = decode_shapes(self._section_lines(lines, "SHAPES"))

        logger.debug(
            "Parsed %d blocks, %d trap, %d rf, %d adc, %d extensions, %d shapes",
            len(blocks), len(trap), len(rf), len(adc), len(extensions), len(shapes),
        )

        return SequenceDocument(
            version=version,
            definitions=definitions,
            blocks=blocks,
            trap=trap,
            rf=rf,
            adc=adc,
            extensions=extensions,
            shapes=shapes,
            source_path=source_path,
            warnings=tuple(warnings),
        )

    def _section_lines(self, lines: Sequence[str], name: str) -> Tuple[str, ...]:
        try:
            return extract_section(lines, name)
        except SectionNotFound:
            if name not in self.config.optional_sections:
                raise
            logger.debug("Optional section [%s] absent", name)
            return ()

    def _records(self, lines: Sequence[str], name: str) -> tuple:
        return decode_section(name, self._section_lines(lines, name))


def parse_sequence(lines: Sequence[str], config: Optional[SequenceReaderConfig] = None) -> SequenceDocument:
    """Parse already-read text lines into a SequenceDocument."""
    return SequenceReader(config).parse(lines)


def read_pulseq(file_path: str | Path, config: Optional[SequenceReaderConfig] = None) -> SequenceDocument:
    """
    Read a sequence file and return its contents as a SequenceDocument.

    This does not check the integrity or physical validity of the file; it makes
    the file contents available with a convenient syntax::

        seq = read_pulseq("path/to/sequence.seq")
        seq.rf[0].amplitude                  # one RF event
        seq.to_frame("rf")["amplitude"]      # all RF amplitudes
    """
    return SequenceReader(config).read(file_path)
