from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from pulseq_reader.models.events import (
    AdcEvent,
    Block,
    Definitions,
    Extension,
    RFEvent,
    TrapEvent,
    VersionInfo,
)
from pulseq_reader.models.shapes import Shape


_RECORD_TYPES: Dict[str, type] = {
    "blocks": Block,
    "trap": TrapEvent,
    "rf": RFEvent,
    "adc": AdcEvent,
    "extensions": Extension,
}


@dataclass(frozen=True)
class SequenceDocument:
    """
    In-memory representation of one sequence file.

    The document is a faithful transcription of the file: references between
    collections (block -> event, RF -> shape, extension -> next extension) are
    kept as the raw 1-based integers and are not checked.

    Notes
    - All collections are tuples in file order; position i (0-based) holds the
      record with 1-based id i + 1.
    - shapes are stored as read (possibly compressed). Use decoded_shape() to
      expand one.
    - warnings collects non-fatal diagnostics emitted while parsing.
    """
    version: VersionInfo
    definitions: Definitions
    blocks: Tuple[Block, ...]
    trap: Tuple[TrapEvent, ...]
    rf: Tuple[RFEvent, ...]
    adc: Tuple[AdcEvent, ...]
    extensions: Tuple[Extension, ...]
    shapes: Tuple[Shape, ...]
    source_path: Optional[Path] = None
    warnings: Tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def shape(self, n: int) -> Shape:
        """Return the n-th declared shape (1-based, declaration order)."""
        if n < 1 or n > len(self.shapes):
            raise IndexError(f"Shape {n} out of range (1..{len(self.shapes)}).")
        return self.shapes[n - 1]

    def shape_by_id(self, shape_id: int) -> Shape:
        """Return the first shape whose literal shape_id matches."""
        for s in self.shapes:
            if s.shape_id == shape_id:
                return s
        raise KeyError(f"No shape with shape_id={shape_id}.")

    def decoded_shape(self, n: int, strict: bool = True) -> Shape:
        """Return the n-th shape (1-based) with its samples fully expanded."""
        from pulseq_reader.analysis.decompress import decode_shape

        return decode_shape(self.shape(n), strict=strict)

    # ------------------------------------------------------------------
    # Columnar views
    # ------------------------------------------------------------------

    def to_frame(self, kind: str) -> pd.DataFrame:
        """
        Struct-of-arrays view of one record collection.

        kind is one of 'blocks', 'trap', 'rf', 'adc', 'extensions'. The frame has
        one column per record field and is indexed by the 1-based record id, so
        ``doc.to_frame("blocks")["dur"]`` gives all block durations at once.
        """
        if kind not in _RECORD_TYPES:
            raise KeyError(f"Unknown record collection '{kind}'; expected one of {sorted(_RECORD_TYPES)}")
        records = getattr(self, kind)
        columns = [f.name for f in fields(_RECORD_TYPES[kind])]
        df = pd.DataFrame([asdict(r) for r in records], columns=columns)
        df.index = pd.RangeIndex(1, len(df) + 1, name="id")
        return df

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    def extension_chain(self, first_id: int) -> List[Extension]:
        """
        Follow next_id links starting at extension first_id (1-based).

        Returns an empty list for first_id == 0 (block without extensions).
        Raises ValueError on a dangling id or a cycle.
        """
        chain: List[Extension] = []
        seen: set[int] = set()
        ext_id = int(first_id)
        while ext_id != 0:
            if ext_id in seen:
                raise ValueError(f"Extension chain starting at {first_id} loops back to {ext_id}.")
            if ext_id < 1 or ext_id > len(self.extensions):
                raise ValueError(f"Extension id {ext_id} out of range (1..{len(self.extensions)}).")
            seen.add(ext_id)
            ext = self.extensions[ext_id - 1]
            chain.append(ext)
            ext_id = ext.next_id
        return chain
