import zlib

from chartclip.errors import DecompressionBomb, DecompressionError

COMPRESSION_LEVEL = 9

# Clipboard contents can be written by any process, never inflate more than this
MAX_DECOMPRESSED_SIZE = 1024 * 1024


def compress(data: bytes, level: int = COMPRESSION_LEVEL) -> bytes:
    return zlib.compress(data, level)


def decompress(data: bytes, max_output_size: int = MAX_DECOMPRESSED_SIZE) -> bytes:
    if max_output_size < 0:
        raise ValueError(f"max_output_size cannot be negative : {max_output_size}")

    decompressor = zlib.decompressobj()
    try:
        # Ask for one byte more than allowed to tell "exactly at the limit"
        # apart from "over the limit"
        output = decompressor.decompress(data, max_output_size + 1)
    except zlib.error as e:
        raise DecompressionError(f"Invalid compressed data : {e}") from e

    if len(output) > max_output_size:
        raise DecompressionBomb(max_output_size)

    if not decompressor.eof:
        raise DecompressionError("Compressed data is truncated")

    if decompressor.unused_data:
        raise DecompressionError(
            f"{len(decompressor.unused_data)} unexpected bytes after the end of "
            "the compressed data"
        )

    return output
