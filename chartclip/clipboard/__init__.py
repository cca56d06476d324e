"""
ChartClip clipboard format
□■ → ChartClip:notes:2:… → □■

Text representation of a selection of notes, meant to be put on the system
clipboard so it can be pasted in another chart editor
"""

from .codec import PayloadInfo, decode, encode, inspect
from .compression import COMPRESSION_LEVEL, MAX_DECOMPRESSED_SIZE
from .envelope import MARKER, SEPARATOR
from .layouts import CURRENT_VERSION, LAYOUTS, rules_for
