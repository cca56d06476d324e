"""Binary layouts of a clipboard note record described using construct.
see https://construct.readthedocs.io/en/latest/index.html

A record is a row delta (relative to the previous record), a column, a note
type tag and, for holds and rolls only, the length of the sustain in rows"""

import io
from dataclasses import dataclass
from typing import Any, Optional

import construct as c
import construct_typed as ct


class KindTag(ct.EnumBase):
    TAP = 0
    HOLD = 1
    MINE = 2
    ROLL = 3
    LIFT = 4
    FAKE = 5


SUSTAINED_TAGS = frozenset({KindTag.HOLD, KindTag.ROLL})


def has_length(this: c.Container) -> bool:
    return this.tag in SUSTAINED_TAGS


class VarUInt64(c.Construct):
    """Same wire format as c.VarInt (LEB128), except it refuses values that
    don't fit in 64 bits instead of reading continuation bytes forever"""

    MAX_BYTES = 10

    def _parse(self, stream: io.BytesIO, context: Any, path: str) -> int:
        value = 0
        for i in range(self.MAX_BYTES):
            byte = c.core.stream_read(stream, 1, path)[0]
            value |= (byte & 0x7F) << (7 * i)
            if byte & 0x80 == 0:
                break
        else:
            raise c.IntegerError(
                f"varint is longer than {self.MAX_BYTES} bytes", path=path
            )

        if value >= 2 ** 64:
            raise c.IntegerError(f"varint does not fit in 64 bits : {value}", path=path)

        return value

    def _build(self, obj: int, stream: io.BytesIO, context: Any, path: str) -> int:
        if not 0 <= obj < 2 ** 64:
            raise c.IntegerError(f"value out of varint range : {obj}", path=path)
        return c.VarInt._build(obj, stream, context, path)

    def _sizeof(self, context: Any, path: str) -> int:
        raise c.SizeofError("varints have no fixed size", path=path)


varuint64 = VarUInt64()


@dataclass
class RecordV1(ct.DataclassMixin):
    row_delta: int = ct.csfield(c.Int32ul)
    column: int = ct.csfield(c.Int8ul)
    tag: int = ct.csfield(c.Int8ul)
    length: Optional[int] = ct.csfield(c.If(has_length, c.Int32ul))


@dataclass
class RecordV2(ct.DataclassMixin):
    row_delta: int = ct.csfield(varuint64)
    column: int = ct.csfield(c.Int8ul)
    tag: int = ct.csfield(c.Int8ul)
    length: Optional[int] = ct.csfield(c.If(has_length, varuint64))


record_v1 = ct.DataclassStruct(RecordV1)
record_v2 = ct.DataclassStruct(RecordV2)
