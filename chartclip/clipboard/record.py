from typing import BinaryIO, Tuple

import construct as c

from chartclip.errors import MalformedRecord
from chartclip.notes import MAX_ROW, NoteRecord

from .layouts import CURRENT_VERSION, LayoutRules, rules_for


def encode_record(
    note: NoteRecord, version: int = CURRENT_VERSION, *, previous_row: int = 0
) -> bytes:
    rules = rules_for(version)
    if note.row < previous_row:
        raise ValueError(
            f"Notes must be sorted by row : {note} comes after row {previous_row}"
        )

    if note.column >= rules.lane_count:
        raise ValueError(
            f"Column {note.column} is out of range, version {version} clipboard "
            f"data only supports {rules.lane_count} columns"
        )

    try:
        tag = rules.tags[note.kind]
    except KeyError:
        raise ValueError(
            f"{note.kind.name} notes can't be stored in version {version} "
            "clipboard data"
        ) from None

    raw = rules.record_type(
        row_delta=note.row - previous_row,
        column=note.column,
        tag=tag,
        length=note.duration if note.kind.is_sustained else None,
    )
    try:
        return rules.record.build(raw)
    except c.ConstructError as e:
        raise ValueError(f"Could not encode {note} : {e}") from e


def decode_record(
    stream: BinaryIO, version: int, *, previous_row: int = 0
) -> Tuple[NoteRecord, int]:
    """Decode the record at the current position of `stream`, returns the
    note and the number of bytes the record took up"""
    return read_record(stream, rules_for(version), previous_row)


def read_record(
    stream: BinaryIO, rules: LayoutRules, previous_row: int
) -> Tuple[NoteRecord, int]:
    offset = stream.tell()
    try:
        raw = rules.record.parse_stream(stream)
    except c.ConstructError as e:
        raise MalformedRecord(f"Invalid record at byte {offset} : {e}") from e

    try:
        kind = rules.kinds[raw.tag]
    except KeyError:
        raise MalformedRecord(
            f"Unknown note type {raw.tag} for version {rules.version} at byte "
            f"{offset}"
        ) from None

    if raw.column >= rules.lane_count:
        raise MalformedRecord(
            f"Column {raw.column} at byte {offset} is out of range, version "
            f"{rules.version} clipboard data only supports {rules.lane_count} "
            "columns"
        )

    row = previous_row + raw.row_delta
    end_row = row + raw.length if kind.is_sustained else None
    if max(row, end_row or 0) > MAX_ROW:
        raise MalformedRecord(f"Record at byte {offset} ends past row {MAX_ROW}")

    note = NoteRecord(row=row, column=raw.column, kind=kind, end_row=end_row)
    return note, stream.tell() - offset
