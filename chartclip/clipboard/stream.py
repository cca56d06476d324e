import io
from typing import Iterable

import construct as c

from chartclip.errors import MalformedRecord, TrailingData
from chartclip.notes import ChartSelection, NoteRecord, canonical_order

from .layouts import CURRENT_VERSION, rules_for
from .record import encode_record, read_record

# Caps the work a pasted payload can ask for, whatever it decompresses to
MAX_RECORD_COUNT = 32768


def encode_stream(notes: Iterable[NoteRecord]) -> bytes:
    """Record count followed by every record, sorted by (row, column) and
    with rows stored relative to the previous record"""
    rules = rules_for(CURRENT_VERSION)
    ordered = canonical_order(notes)
    if len(ordered) > MAX_RECORD_COUNT:
        raise ValueError(
            f"Can't copy {len(ordered)} notes at once, the limit is "
            f"{MAX_RECORD_COUNT}"
        )

    chunks = [rules.count.build(len(ordered))]
    previous_row = 0
    for note in ordered:
        chunks.append(encode_record(note, CURRENT_VERSION, previous_row=previous_row))
        previous_row = note.row

    return b"".join(chunks)


def decode_stream(buffer: bytes, version: int) -> ChartSelection:
    rules = rules_for(version)
    stream = io.BytesIO(buffer)
    try:
        count = rules.count.parse_stream(stream)
    except c.ConstructError as e:
        raise MalformedRecord(f"Could not read the record count : {e}") from e

    if count > MAX_RECORD_COUNT:
        raise MalformedRecord(
            f"{count} records were declared, the limit is {MAX_RECORD_COUNT}"
        )

    remaining = len(buffer) - stream.tell()
    if count * rules.min_record_size > remaining:
        raise MalformedRecord(
            f"{count} records were declared but only {remaining} bytes follow"
        )

    notes = []
    previous_row = 0
    for _ in range(count):
        note = read_record(stream, rules, previous_row)[0]
        notes.append(note)
        previous_row = note.row

    leftover = len(buffer) - stream.tell()
    if leftover:
        raise TrailingData(
            f"{leftover} unexpected bytes after the last of the {count} declared "
            "records"
        )

    return notes
