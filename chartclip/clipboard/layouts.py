"""Which binary layout goes with which version number

Encoding always uses CURRENT_VERSION, the other versions are only kept around
so that older clipboard data can still be pasted"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Type, Union

import construct as c

from chartclip.errors import UnsupportedVersion
from chartclip.notes import MAX_COLUMN, NoteKind

from .construct import KindTag, RecordV1, RecordV2, record_v1, record_v2, varuint64

AnyRecord = Union[RecordV1, RecordV2]


@dataclass(frozen=True)
class LayoutRules:
    version: int
    count: c.Construct
    record: c.Construct
    record_type: Type[AnyRecord]
    lane_count: int
    kinds: Mapping[int, NoteKind]
    # smallest possible record : 1-byte-wide fields and no length
    min_record_size: int
    tags: Mapping[NoteKind, int] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", {v: k for k, v in self.kinds.items()})


LEGACY_KINDS = {
    KindTag.TAP: NoteKind.TAP,
    KindTag.HOLD: NoteKind.HOLD,
    KindTag.MINE: NoteKind.MINE,
    KindTag.ROLL: NoteKind.ROLL,
}

LAYOUTS: Dict[int, LayoutRules] = {
    1: LayoutRules(
        version=1,
        count=c.Int32ul,
        record=record_v1,
        record_type=RecordV1,
        lane_count=16,
        kinds=LEGACY_KINDS,
        min_record_size=6,
    ),
    2: LayoutRules(
        version=2,
        count=varuint64,
        record=record_v2,
        record_type=RecordV2,
        lane_count=MAX_COLUMN + 1,
        kinds={
            **LEGACY_KINDS,
            KindTag.LIFT: NoteKind.LIFT,
            KindTag.FAKE: NoteKind.FAKE,
        },
        min_record_size=3,
    ),
}

CURRENT_VERSION = 2
LEGACY_VERSIONS = frozenset(v for v in LAYOUTS if v != CURRENT_VERSION)


def rules_for(version: int) -> LayoutRules:
    try:
        return LAYOUTS[version]
    except KeyError:
        raise UnsupportedVersion(version) from None
