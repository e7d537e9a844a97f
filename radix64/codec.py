"""Abstract base class for codecs."""

from abc import ABC, abstractmethod
from typing import Union


class Codec(ABC):
    """Base codec interface for turning bytes into text and back."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode a byte sequence.

        Args:
            data: The bytes to encode

        Returns:
            The encoded text
        """
        pass

    @abstractmethod
    def decode(self, text: Union[str, bytes]) -> bytes:
        """Decode text produced by :meth:`encode`.

        Args:
            text: The text to decode

        Returns:
            The original bytes
        """
        pass
