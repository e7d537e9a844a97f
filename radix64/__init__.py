"""radix64 - A small base64-style codec for carrying binary data through text channels."""

__version__ = "0.1.0"

from .codec import Codec
from .config import CodecConfig
from .errors import DecodeError, DecodeErrorKind, InvalidSymbolError
from .alphabet import Alphabet, STANDARD, URL_SAFE
from .base64_codec import Base64Codec, DecodeState, encoded_length, standard, url_safe

_default_codec = Base64Codec()


def encode(data: bytes) -> str:
    """Encode bytes with the standard alphabet, padded."""
    return _default_codec.encode(data)


def decode(text) -> bytes:
    """Decode standard-alphabet padded text, raising DecodeError on bad input."""
    return _default_codec.decode(text)


def encode_string(text: str, encoding: str = "utf-8") -> str:
    """Encode a string by first converting it to bytes."""
    return encode(text.encode(encoding))


def decode_string(text, encoding: str = "utf-8") -> str:
    """Decode to bytes and convert the result back to a string."""
    return decode(text).decode(encoding)


__all__ = [
    "Codec",
    "CodecConfig",
    "DecodeError",
    "DecodeErrorKind",
    "InvalidSymbolError",
    "Alphabet",
    "STANDARD",
    "URL_SAFE",
    "Base64Codec",
    "DecodeState",
    "encoded_length",
    "standard",
    "url_safe",
    "encode",
    "decode",
    "encode_string",
    "decode_string",
]
