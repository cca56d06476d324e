"""JSON representation of a selection of notes, used by the command line tool

{
    "notes": [
        {"row": 0, "column": 0, "kind": "tap"},
        {"row": 8, "column": 1, "kind": "hold", "end_row": 16}
    ]
}
"""

from typing import Any, Dict, Iterable, Optional

import simplejson as json
from marshmallow import (
    RAISE,
    Schema,
    ValidationError,
    fields,
    validate,
    validates_schema,
)

from chartclip.notes import (
    MAX_COLUMN,
    MAX_ROW,
    ChartSelection,
    NoteKind,
    NoteRecord,
)


class StrictSchema(Schema):
    class Meta:
        unknown = RAISE


class JSONNote(StrictSchema):
    row = fields.Integer(
        required=True, strict=True, validate=validate.Range(min=0, max=MAX_ROW)
    )
    column = fields.Integer(
        required=True, strict=True, validate=validate.Range(min=0, max=MAX_COLUMN)
    )
    kind = fields.String(
        required=True, validate=validate.OneOf([k.value for k in NoteKind])
    )
    end_row = fields.Integer(strict=True, validate=validate.Range(max=MAX_ROW))

    @validates_schema
    def validate_end_row(self, data: Dict[str, Any], **kwargs: Any) -> None:
        kind = NoteKind(data["kind"])
        end_row = data.get("end_row")
        if kind.is_sustained:
            if end_row is None:
                raise ValidationError(f"{kind.value} notes need an end_row")
            if end_row < data["row"]:
                raise ValidationError(f"{kind.value} note ends before it starts")
        elif end_row is not None:
            raise ValidationError(f"{kind.value} notes can't have an end_row")


class JSONSelection(StrictSchema):
    notes = fields.List(fields.Nested(JSONNote), required=True)


SELECTION_SCHEMA = JSONSelection()


def load_selection(raw_json: Any) -> ChartSelection:
    """Raises marshmallow.ValidationError if raw_json does not describe a
    valid selection"""
    selection = SELECTION_SCHEMA.load(raw_json)
    return [
        NoteRecord(
            row=n["row"],
            column=n["column"],
            kind=NoteKind(n["kind"]),
            end_row=n.get("end_row"),
        )
        for n in selection["notes"]
    ]


def dump_selection(notes: Iterable[NoteRecord]) -> Dict[str, Any]:
    return {"notes": [dump_note(n) for n in notes]}


def dump_note(note: NoteRecord) -> Dict[str, Any]:
    res: Dict[str, Any] = {
        "row": note.row,
        "column": note.column,
        "kind": note.kind.value,
    }
    if note.end_row is not None:
        res["end_row"] = note.end_row
    return res


def loads_selection(text: str) -> ChartSelection:
    try:
        raw_json = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON : {e}") from e
    return load_selection(raw_json)


def dumps_selection(notes: Iterable[NoteRecord], indent: Optional[int] = None) -> str:
    return json.dumps(dump_selection(notes), indent=indent)
