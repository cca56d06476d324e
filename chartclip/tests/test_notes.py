import pytest

from chartclip.notes import MAX_ROW, NoteKind, NoteRecord, canonical_order


def test_duration() -> None:
    assert NoteRecord(row=8, column=1, kind=NoteKind.ROLL, end_row=20).duration == 12
    assert NoteRecord(row=8, column=1, kind=NoteKind.MINE).duration == 0


def test_zero_length_holds_are_allowed() -> None:
    NoteRecord(row=8, column=1, kind=NoteKind.HOLD, end_row=8)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(row=-1, column=0),
        dict(row=0, column=-1),
        dict(row=0, column=128),
        dict(row=MAX_ROW + 1, column=0),
        dict(row=0, column=0, kind=NoteKind.HOLD, end_row=MAX_ROW + 1),
        dict(row=0, column=0, kind=NoteKind.HOLD),
        dict(row=4, column=0, kind=NoteKind.ROLL, end_row=3),
        dict(row=0, column=0, kind=NoteKind.TAP, end_row=4),
        dict(row=0, column=0, kind=NoteKind.LIFT, end_row=0),
    ],
)
def test_that_invalid_notes_cannot_be_created(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        NoteRecord(**kwargs)


def test_that_canonical_order_is_stable() -> None:
    a = NoteRecord(row=4, column=0, kind=NoteKind.FAKE)
    b = NoteRecord(row=4, column=0)
    c = NoteRecord(row=0, column=3)
    d = NoteRecord(row=4, column=1)
    assert canonical_order([d, a, b, c]) == [c, a, b, d]
    assert canonical_order([d, b, a, c]) == [c, b, a, d]


def test_that_notes_are_hashable_values() -> None:
    assert len({NoteRecord(row=0, column=0), NoteRecord(row=0, column=0)}) == 1
