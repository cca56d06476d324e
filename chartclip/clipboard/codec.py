"""The two entry points of the clipboard format

encode : notes → record stream → zlib → ChartClip:notes:<version>:<base64>
decode : the exact reverse, checking everything along the way since the
clipboard can contain anything"""

import warnings
from dataclasses import dataclass
from typing import Iterable, Tuple

from chartclip.notes import ChartSelection, NoteRecord

from .compression import (
    COMPRESSION_LEVEL,
    MAX_DECOMPRESSED_SIZE,
    compress,
    decompress,
)
from .envelope import unwrap, wrap
from .layouts import CURRENT_VERSION, LEGACY_VERSIONS
from .stream import decode_stream, encode_stream


def encode(
    notes: Iterable[NoteRecord], *, compression_level: int = COMPRESSION_LEVEL
) -> str:
    buffer = encode_stream(notes)
    return wrap(CURRENT_VERSION, compress(buffer, level=compression_level))


def decode(
    text: str, *, max_decompressed_size: int = MAX_DECOMPRESSED_SIZE
) -> ChartSelection:
    """Raises a subclass of ClipboardError if the text is not valid clipboard
    data"""
    version, _, buffer = open_envelope(text, max_decompressed_size)
    return decode_stream(buffer, version)


@dataclass(frozen=True)
class PayloadInfo:
    version: int
    compressed_size: int
    decompressed_size: int
    record_count: int


def inspect(
    text: str, *, max_decompressed_size: int = MAX_DECOMPRESSED_SIZE
) -> PayloadInfo:
    """Decodes the text just like decode() but only reports sizes"""
    version, compressed, buffer = open_envelope(text, max_decompressed_size)
    notes = decode_stream(buffer, version)
    return PayloadInfo(
        version=version,
        compressed_size=len(compressed),
        decompressed_size=len(buffer),
        record_count=len(notes),
    )


def open_envelope(text: str, max_decompressed_size: int) -> Tuple[int, bytes, bytes]:
    """Returns the version, the compressed bytes and the decompressed record
    stream"""
    version, compressed = unwrap(text)
    if version in LEGACY_VERSIONS:
        warnings.warn(
            f"Clipboard data uses the legacy version {version} layout, "
            f"copying it again will upgrade it to version {CURRENT_VERSION}",
            DeprecationWarning,
        )
    buffer = decompress(compressed, max_decompressed_size)
    return version, compressed, buffer
