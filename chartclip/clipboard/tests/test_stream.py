import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chartclip.errors import MalformedRecord, TrailingData
from chartclip.notes import ChartSelection, NoteKind, NoteRecord, canonical_order
from chartclip.testutils import strategies as ccst
from chartclip.testutils.test_patterns import make_legacy_stream

from ..construct import varuint64
from ..layouts import CURRENT_VERSION
from ..stream import MAX_RECORD_COUNT, decode_stream, encode_stream

EXAMPLE = [
    NoteRecord(row=0, column=0),
    NoteRecord(row=4, column=3),
    NoteRecord(row=8, column=1, kind=NoteKind.HOLD, end_row=16),
]

EXAMPLE_BYTES = b"\x03" + b"\x00\x00\x00" + b"\x04\x03\x00" + b"\x04\x01\x01\x08"


def test_example_layout() -> None:
    assert encode_stream(EXAMPLE) == EXAMPLE_BYTES
    assert decode_stream(EXAMPLE_BYTES, CURRENT_VERSION) == EXAMPLE


def test_that_encoding_sorts_notes() -> None:
    assert encode_stream(reversed(EXAMPLE)) == EXAMPLE_BYTES


def test_that_ties_keep_their_input_order() -> None:
    mine = NoteRecord(row=4, column=1, kind=NoteKind.MINE)
    tap = NoteRecord(row=4, column=1)
    first = NoteRecord(row=0, column=2)
    notes = [mine, first, tap]
    assert decode_stream(encode_stream(notes), CURRENT_VERSION) == [first, mine, tap]


def test_empty_selection() -> None:
    assert encode_stream([]) == b"\x00"
    assert decode_stream(b"\x00", CURRENT_VERSION) == []


@given(ccst.selection())
def test_that_selections_roundtrip(notes: ChartSelection) -> None:
    buffer = encode_stream(notes)
    assert decode_stream(buffer, CURRENT_VERSION) == canonical_order(notes)


@given(ccst.selection(note_strat=ccst.legacy_note_record()))
def test_that_legacy_streams_decode(notes: ChartSelection) -> None:
    buffer = make_legacy_stream(notes)
    assert decode_stream(buffer, 1) == canonical_order(notes)


@given(ccst.selection(unique_positions=True), st.randoms())
def test_that_input_order_does_not_matter(
    notes: ChartSelection, rng: random.Random
) -> None:
    shuffled = list(notes)
    rng.shuffle(shuffled)
    assert encode_stream(shuffled) == encode_stream(notes)


def test_that_a_missing_count_is_refused() -> None:
    with pytest.raises(MalformedRecord):
        decode_stream(b"", CURRENT_VERSION)


def test_that_impossible_counts_are_refused() -> None:
    with pytest.raises(MalformedRecord):
        decode_stream(b"\x05\x00\x00\x00", CURRENT_VERSION)

    with pytest.raises(MalformedRecord):
        decode_stream(b"\xff" * 9 + b"\x01", CURRENT_VERSION)


def test_that_missing_records_are_refused() -> None:
    # The count fits the byte budget but the second record is cut short
    buffer = b"\x02" + b"\x00\x00\x01\x04" + b"\x00\x00"
    with pytest.raises(MalformedRecord):
        decode_stream(buffer, CURRENT_VERSION)


def test_that_trailing_bytes_are_refused() -> None:
    with pytest.raises(TrailingData):
        decode_stream(EXAMPLE_BYTES + b"\x00", CURRENT_VERSION)

    with pytest.raises(TrailingData):
        decode_stream(b"\x00\x00", CURRENT_VERSION)


def test_that_counts_over_the_limit_are_refused() -> None:
    count = MAX_RECORD_COUNT + 1
    buffer = varuint64.build(count) + b"\x00\x00\x00" * count
    with pytest.raises(MalformedRecord):
        decode_stream(buffer, CURRENT_VERSION)


def test_that_selections_over_the_limit_cannot_be_encoded() -> None:
    notes = [NoteRecord(row=0, column=0)] * (MAX_RECORD_COUNT + 1)
    with pytest.raises(ValueError):
        encode_stream(notes)
