"""Symbol tables mapping 6-bit values to printable characters.

An alphabet is 64 distinct printable ASCII symbols plus one padding symbol
that is not among them. Lookups run both ways in constant time: a string
index for value → symbol and a dict for symbol → value.

Predefined alphabets:
    STANDARD: A-Z a-z 0-9 + /  (padding '=')
    URL_SAFE: A-Z a-z 0-9 - _  (padding '=')
"""

import string
from typing import Dict

from .errors import InvalidSymbolError

ALPHABET_SIZE = 64
DEFAULT_PADDING = "="

_PRINTABLE = frozenset(chr(c) for c in range(0x21, 0x7F))


class Alphabet:
    """Immutable 64-symbol table with a reverse lookup."""

    __slots__ = ("_symbols", "_padding", "_values", "_name")

    def __init__(self, symbols: str, padding: str = DEFAULT_PADDING, name: str = "custom"):
        if len(symbols) != ALPHABET_SIZE:
            raise ValueError(f"Alphabet needs {ALPHABET_SIZE} symbols, got {len(symbols)}")
        if len(set(symbols)) != ALPHABET_SIZE:
            raise ValueError("Alphabet symbols must be distinct")
        bad = [s for s in symbols if s not in _PRINTABLE]
        if bad:
            raise ValueError(f"Alphabet symbols must be printable ASCII: {bad!r}")
        if len(padding) != 1 or padding not in _PRINTABLE:
            raise ValueError(f"Padding must be one printable ASCII character: {padding!r}")
        if padding in symbols:
            raise ValueError(f"Padding {padding!r} is also a data symbol")

        values: Dict[str, int] = {s: i for i, s in enumerate(symbols)}
        object.__setattr__(self, "_symbols", symbols)
        object.__setattr__(self, "_padding", padding)
        object.__setattr__(self, "_values", values)
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key, value):
        raise AttributeError("Alphabet is immutable")

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def padding(self) -> str:
        return self._padding

    @property
    def name(self) -> str:
        return self._name

    def symbol_at(self, index: int) -> str:
        """Return the symbol for a 6-bit value (0..63)."""
        return self._symbols[index]

    def index_of(self, symbol: str) -> int:
        """Return the 6-bit value of a data symbol.

        Raises:
            InvalidSymbolError: If ``symbol`` is not one of the 64 data symbols.
                The padding symbol is not a data symbol.
        """
        try:
            return self._values[symbol]
        except KeyError:
            raise InvalidSymbolError(symbol) from None

    def is_padding(self, symbol: str) -> bool:
        return symbol == self._padding

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._values or symbol == self._padding

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def __repr__(self) -> str:
        return f"Alphabet(name={self._name!r}, padding={self._padding!r})"


_BASE = string.ascii_uppercase + string.ascii_lowercase + string.digits

STANDARD = Alphabet(_BASE + "+/", name="standard")
URL_SAFE = Alphabet(_BASE + "-_", name="url_safe")
