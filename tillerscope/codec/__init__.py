"""Release payload codec.

Submodules:
    schema   -- ``hapi`` protobuf message classes built at import time.
    decoder  -- base64 -> optional gzip -> protobuf decoding and its inverse.
"""

from tillerscope.codec.decoder import (
    GZIP_SIGNATURE,
    decode_release,
    encode_release,
    summarize_release,
    try_decode_release,
)

__all__ = [
    "GZIP_SIGNATURE",
    "decode_release",
    "encode_release",
    "summarize_release",
    "try_decode_release",
]
