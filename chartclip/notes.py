"""Provides NoteRecord, the model for a single chart event that can be copied
to / pasted from the clipboard

Positions are expressed in rows, the integer subdivision of the chart
timeline used by the editor"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class NoteKind(Enum):
    TAP = "tap"
    HOLD = "hold"
    MINE = "mine"
    ROLL = "roll"
    LIFT = "lift"
    FAKE = "fake"

    @property
    def is_sustained(self) -> bool:
        return self in SUSTAINED_KINDS


SUSTAINED_KINDS = frozenset({NoteKind.HOLD, NoteKind.ROLL})

# Largest values the current clipboard layout can store
MAX_COLUMN = 127
MAX_ROW = 2 ** 64 - 1


@dataclass(frozen=True)
class NoteRecord:
    """A note on a given row and column. Only holds and rolls have an end_row,
    which is the row their sustain stops on"""

    row: int
    column: int
    kind: NoteKind = NoteKind.TAP
    end_row: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0 <= self.row <= MAX_ROW:
            raise ValueError(f"row out of [0, {MAX_ROW}] range : {self.row}")
        if not 0 <= self.column <= MAX_COLUMN:
            raise ValueError(f"column out of [0, {MAX_COLUMN}] range : {self.column}")
        if self.kind.is_sustained:
            if self.end_row is None:
                raise ValueError(f"{self.kind.name} notes need an end_row")
            if self.end_row < self.row:
                raise ValueError(
                    f"{self.kind.name} note ends before it starts : "
                    f"row={self.row}, end_row={self.end_row}"
                )
            if self.end_row > MAX_ROW:
                raise ValueError(f"end_row out of range : {self.end_row}")
        elif self.end_row is not None:
            raise ValueError(f"{self.kind.name} notes can't have an end_row")

    @property
    def duration(self) -> int:
        if self.end_row is None:
            return 0
        return self.end_row - self.row

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.row, self.column)


ChartSelection = List[NoteRecord]


def canonical_order(notes: Iterable[NoteRecord]) -> ChartSelection:
    """Sort notes by (row, column), notes that share both keep the order they
    were given in"""
    return sorted(notes, key=lambda n: n.sort_key)
