"""
Hypothesis strategies to generate notes and selections
"""

from typing import Optional

import hypothesis.strategies as st

from chartclip.notes import MAX_COLUMN, ChartSelection, NoteKind, NoteRecord


@st.composite
def note_record(
    draw: st.DrawFn,
    row_strat: st.SearchStrategy[int] = st.integers(min_value=0, max_value=10_000),
    column_strat: st.SearchStrategy[int] = st.integers(
        min_value=0, max_value=MAX_COLUMN
    ),
    kind_strat: st.SearchStrategy[NoteKind] = st.sampled_from(NoteKind),
    duration_strat: st.SearchStrategy[int] = st.integers(min_value=0, max_value=1000),
) -> NoteRecord:
    row = draw(row_strat)
    column = draw(column_strat)
    kind = draw(kind_strat)
    end_row: Optional[int] = None
    if kind.is_sustained:
        end_row = row + draw(duration_strat)
    return NoteRecord(row=row, column=column, kind=kind, end_row=end_row)


def legacy_note_record() -> st.SearchStrategy[NoteRecord]:
    """Notes that fit in the version 1 layout : 16 columns, no lifts or fakes"""
    return note_record(
        column_strat=st.integers(min_value=0, max_value=15),
        kind_strat=st.sampled_from(
            [NoteKind.TAP, NoteKind.HOLD, NoteKind.MINE, NoteKind.ROLL]
        ),
    )


@st.composite
def selection(
    draw: st.DrawFn,
    note_strat: st.SearchStrategy[NoteRecord] = note_record(),
    min_size: int = 0,
    max_size: int = 64,
    unique_positions: bool = False,
) -> ChartSelection:
    if unique_positions:
        strat = st.lists(
            note_strat,
            min_size=min_size,
            max_size=max_size,
            unique_by=lambda n: n.sort_key,
        )
    else:
        strat = st.lists(note_strat, min_size=min_size, max_size=max_size)
    notes: ChartSelection = draw(strat)
    return notes
