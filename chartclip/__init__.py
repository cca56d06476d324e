from .clipboard import decode, encode, inspect
from .errors import (
    ClipboardError,
    DecompressionBomb,
    DecompressionError,
    InvalidEncoding,
    InvalidPrefix,
    InvalidVersionField,
    MalformedRecord,
    TrailingData,
    UnsupportedVersion,
)
from .notes import ChartSelection, NoteKind, NoteRecord, canonical_order
from .version import __version__
