from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from static_huffman.core.alphabet import Alphabet
    from static_huffman.core.codec_huffman import EncodedArtifact


class Codec(ABC):
    """
    Minimal interface for a symbol codec.

    Two API levels:
      - symbols: in-memory sequences over an explicit alphabet
      - bytes: file contents, converted to symbols according to the alphabet
    """

    codec_id: str

    @abstractmethod
    def compress_symbols(self, symbols: Sequence[int], alphabet: "Alphabet") -> "EncodedArtifact":
        raise NotImplementedError

    @abstractmethod
    def decompress_symbols(self, artifact: "EncodedArtifact") -> list[int]:
        raise NotImplementedError

    @abstractmethod
    def compress_bytes(self, data: bytes, alphabet: "Alphabet") -> "EncodedArtifact":
        raise NotImplementedError

    @abstractmethod
    def decompress_bytes(self, artifact: "EncodedArtifact") -> bytes:
        raise NotImplementedError
