"""Everything that can go wrong while reading clipboard data

They are all ValueErrors since they all boil down to "this text is not
something we can paste", callers that don't care about the details can catch
ClipboardError and move on"""


class ClipboardError(ValueError):
    pass


class InvalidPrefix(ClipboardError):
    """The text does not start with the expected marker"""


class InvalidVersionField(ClipboardError):
    """The version segment is missing or is not a non-negative integer"""


class UnsupportedVersion(ClipboardError):
    """The version is well-formed but no known layout goes with it"""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported clipboard data version : {version}")
        self.version = version


class InvalidEncoding(ClipboardError):
    """The base64 body could not be decoded"""


class DecompressionError(ClipboardError):
    """The compressed bytes are not a valid zlib stream"""


class DecompressionBomb(ClipboardError):
    """The decompressed data would be larger than allowed"""

    def __init__(self, max_output_size: int) -> None:
        super().__init__(
            f"Decompressed data exceeds the maximum allowed size of "
            f"{max_output_size} bytes"
        )
        self.max_output_size = max_output_size


class MalformedRecord(ClipboardError):
    pass


class TrailingData(ClipboardError):
    pass
