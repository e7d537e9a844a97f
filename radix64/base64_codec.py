"""Implementation of a base64-style codec.

Bytes are taken three at a time. Each group of 24 bits is split into four
6-bit values, most significant first, and every value is replaced by the
alphabet symbol at that index. A short final group is completed with zero
filler bits and, under the padded policy, filled out to four symbols with the
padding character:

    b"Man" -> 01001101 01100001 01101110 -> 010011 010110 000101 101110 -> "TWFu"
    b"M"   -> 01001101 (+0000)           -> 010011 010000               -> "TQ=="

Decoding reverses this and validates the text on the way: unknown
characters, padding anywhere but the tail, lengths that cannot form whole
bytes and (under the strict policy) set filler bits are all rejected with a
:class:`DecodeError` that names the offending position.
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from .alphabet import STANDARD, URL_SAFE, Alphabet
from .codec import Codec
from .config import CodecConfig
from .errors import DecodeError, DecodeErrorKind, InvalidSymbolError

logger = logging.getLogger(__name__)

# 6-bit and 8-bit masks
SEXTET_MASK = 0x3F
OCTET_MASK = 0xFF
ENCODE_SHIFTS = (18, 12, 6, 0)
DECODE_SHIFTS = (16, 8, 0)

# Padding symbols needed to fill out a final group of n leftover bytes
_PAD_COUNT = {0: 0, 1: 2, 2: 1}
# Bytes carried by a final group of n data symbols
_TAIL_BYTES = {0: 0, 2: 1, 3: 2}


class DecodeState(Enum):
    """Positions of the padding scanner while it walks the text."""

    SCANNING = "scanning"                            # No data symbol seen yet
    EXPECTING_DATA_OR_PAD = "expecting_data_or_pad"  # Inside the data run
    EXPECTING_PAD_OR_END = "expecting_pad_or_end"    # Inside the trailing padding
    FAILED = "failed"


def encoded_length(size: int, pad: bool = True) -> int:
    """Return the number of symbols needed to encode ``size`` bytes.

    Args:
        size: Number of input bytes
        pad: Whether the final group is padded to four symbols

    Returns:
        ``4 * ceil(size / 3)`` when padded, ``ceil(size * 8 / 6)`` otherwise.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if pad:
        return 4 * ((size + 2) // 3)
    return (size * 8 + 5) // 6


class Base64Codec(Codec):
    """Codec mapping bytes to text over a 64-symbol alphabet.

    The codec holds no mutable state; one instance can be shared between
    threads and reused for any number of calls.

    Args:
        alphabet: Symbol table to use. Defaults to :data:`STANDARD`.
        config: Padding and filler-bit policy. Defaults to padded and strict.

    Examples:
        >>> codec = Base64Codec()
        >>> codec.encode(b"Man")
        'TWFu'
        >>> codec.decode("TQ==")
        b'M'
    """

    def __init__(self, alphabet: Alphabet = STANDARD, config: Optional[CodecConfig] = None):
        self.alphabet = alphabet
        self.config = config if config is not None else CodecConfig()
        logger.debug(
            "Created codec alphabet=%s pad=%s strict_filler_bits=%s",
            alphabet.name, self.config.pad, self.config.strict_filler_bits,
        )

    def __repr__(self) -> str:
        return f"Base64Codec(alphabet={self.alphabet!r}, config={self.config!r})"

    def encode(self, data: bytes) -> str:
        """Encode a byte sequence.

        Args:
            data: Any bytes-like object

        Returns:
            The encoded text. Empty input gives an empty string.

        Raises:
            TypeError: If ``data`` is a ``str`` or not bytes-like.
        """
        if isinstance(data, str):
            raise TypeError("encode() takes bytes; use encode_string() for text")
        data = memoryview(data).cast("B")

        symbol_at = self.alphabet.symbol_at
        out: List[str] = []
        size = len(data)
        whole = size - size % 3

        for i in range(0, whole, 3):
            merged = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
            out.extend(symbol_at((merged >> shift) & SEXTET_MASK) for shift in ENCODE_SHIFTS)

        leftover = size - whole
        if leftover:
            merged = data[whole] << 16
            if leftover == 2:
                merged |= data[whole + 1] << 8
            # 1 byte -> 2 symbols, 2 bytes -> 3 symbols
            shifts = ENCODE_SHIFTS[:leftover + 1]
            out.extend(symbol_at((merged >> shift) & SEXTET_MASK) for shift in shifts)
            if self.config.pad:
                out.append(self.alphabet.padding * _PAD_COUNT[leftover])

        return "".join(out)

    def decode(self, text: Union[str, bytes]) -> bytes:
        """Decode text back to the original bytes.

        Args:
            text: Encoded text. Bytes-like input is read one character per
                byte, so non-ASCII bytes are reported as invalid characters.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: If the text is not valid under this codec's policy.
                Checks run in order: characters, padding placement, length,
                filler bits.
        """
        if not isinstance(text, str):
            text = bytes(text).decode("latin-1")

        try:
            values = self._symbol_values(text)
            data_len = self._scan_padding(text)
            self._check_length(text, data_len)
            return self._assemble(values, data_len)
        except DecodeError as e:
            logger.debug("Rejected input of length %d: %s", len(text), e)
            raise

    def _symbol_values(self, text: str) -> List[int]:
        """Look up every data symbol, failing on the first unknown character."""
        index_of = self.alphabet.index_of
        is_padding = self.alphabet.is_padding
        values = []
        for pos, symbol in enumerate(text):
            if is_padding(symbol):
                continue
            try:
                values.append(index_of(symbol))
            except InvalidSymbolError:
                raise DecodeError(
                    DecodeErrorKind.INVALID_CHARACTER, pos, f"{symbol!r} is not in the alphabet"
                ) from None
        return values

    def _scan_padding(self, text: str) -> int:
        """Check padding placement and return the number of data symbols.

        Walks the text once. Padding is allowed only as a single trailing run
        of at most two symbols after at least one data symbol, and not at all
        when the codec is unpadded.
        """
        is_padding = self.alphabet.is_padding
        state = DecodeState.SCANNING
        run_start = len(text)

        for pos, symbol in enumerate(text):
            state, detail = self._next_state(state, is_padding(symbol), pos - run_start)
            if state is DecodeState.FAILED:
                # Failures inside the trailing run point at where the run began
                position = run_start if run_start < len(text) else pos
                raise DecodeError(DecodeErrorKind.MISPLACED_PADDING, position, detail)
            if state is DecodeState.EXPECTING_PAD_OR_END and run_start == len(text):
                run_start = pos

        return run_start

    def _next_state(self, state: DecodeState, pad: bool, run_length: int):
        """Advance the padding scanner by one symbol.

        Returns:
            Tuple of (new state, failure detail). The detail is empty unless
            the new state is FAILED.
        """
        if state is DecodeState.EXPECTING_PAD_OR_END:
            if not pad:
                return DecodeState.FAILED, "data after padding"
            if run_length >= 2:
                return DecodeState.FAILED, "more than two padding symbols"
            return state, ""
        if not pad:
            return DecodeState.EXPECTING_DATA_OR_PAD, ""
        if not self.config.pad:
            return DecodeState.FAILED, "padding is disabled"
        if state is DecodeState.SCANNING:
            return DecodeState.FAILED, "padding before any data"
        return DecodeState.EXPECTING_PAD_OR_END, ""

    def _check_length(self, text: str, data_len: int) -> None:
        if self.config.pad:
            remainder = len(text) % 4
            if remainder:
                raise DecodeError(
                    DecodeErrorKind.INVALID_LENGTH,
                    len(text) - remainder,
                    f"length {len(text)} is not a multiple of 4",
                )
        elif data_len % 4 == 1:
            raise DecodeError(
                DecodeErrorKind.INVALID_LENGTH,
                data_len - 1,
                "a single trailing symbol cannot complete a byte",
            )

    def _assemble(self, values: List[int], data_len: int) -> bytes:
        out = bytearray()
        whole = data_len - data_len % 4

        for i in range(0, whole, 4):
            merged = (values[i] << 18) | (values[i + 1] << 12) | (values[i + 2] << 6) | values[i + 3]
            out.extend((merged >> shift) & OCTET_MASK for shift in DECODE_SHIFTS)

        tail = data_len - whole
        if tail:
            merged = 0
            for value in values[whole:]:
                merged = (merged << 6) | value
            filler_bits = tail * 6 - _TAIL_BYTES[tail] * 8
            filler = merged & ((1 << filler_bits) - 1)
            if filler and self.config.strict_filler_bits:
                raise DecodeError(
                    DecodeErrorKind.NON_ZERO_PADDING,
                    data_len - 1,
                    f"filler bits are {filler:0{filler_bits}b}",
                )
            merged >>= filler_bits
            out.extend((merged >> (8 * k)) & OCTET_MASK for k in reversed(range(_TAIL_BYTES[tail])))

        return bytes(out)


def standard(config: Optional[CodecConfig] = None) -> Base64Codec:
    """Return a codec over the standard ``A-Za-z0-9+/`` alphabet."""
    return Base64Codec(STANDARD, config)


def url_safe(config: Optional[CodecConfig] = None) -> Base64Codec:
    """Return a codec over the URL-safe ``A-Za-z0-9-_`` alphabet."""
    return Base64Codec(URL_SAFE, config)
