from .throttle import ThrottledCounter
from .decoder import RecordDecoder, Row, WalkResult, walk_line
from .encoder import NULL_TEXT, RecordEncoder, encode_row, render_value
from .line_codec import LineCodec

__all__ = [
    "LineCodec",
    "NULL_TEXT",
    "RecordDecoder",
    "RecordEncoder",
    "Row",
    "ThrottledCounter",
    "WalkResult",
    "encode_row",
    "render_value",
    "walk_line",
]
