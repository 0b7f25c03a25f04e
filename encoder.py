import math
from types import MappingProxyType
from typing import Mapping, NamedTuple

from huffman import (
    build_tree,
    count_frequencies,
    decode_bits,
    encode_text,
    generate_codes,
)

BITS_PER_CHAR = 8  #: Size assumed for one uncompressed character


class EncodingResult(NamedTuple):
    """Snapshot of one Huffman encoding run.

    :ivar text: The input text.
    :ivar frequencies: Read-only mapping from symbol to count.
    :ivar codes: Read-only mapping from symbol to its bit string.
    :ivar encoded: Concatenated codes of ``text``.
    :ivar decoded: ``encoded`` decoded back through the tree.
    :ivar original_size: ``len(text) * 8`` bits.
    :ivar compressed_size: ``len(encoded)`` bits.
    :ivar compression_ratio: Compressed size as a percentage of the original
        size; ``0.0`` for empty input.
    """

    text: str
    frequencies: Mapping[str, int]
    codes: Mapping[str, str]
    encoded: str
    decoded: str
    original_size: int
    compressed_size: int
    compression_ratio: float

    @property
    def space_saved(self) -> float:
        """Percentage of the original size saved; ``0.0`` for empty input."""
        if self.original_size == 0:
            return 0.0
        return 100.0 - self.compression_ratio

    @property
    def average_code_length(self) -> float:
        """Mean code length in bits per input symbol."""
        if not self.text:
            return 0.0
        return self.compressed_size / len(self.text)

    @property
    def entropy(self) -> float:
        """Shannon entropy of the symbol distribution in bits per symbol.

        This is the lower bound for :attr:`average_code_length`.
        """
        total = len(self.text)
        h = 0.0
        for count in self.frequencies.values():
            p = count / total
            h -= p * math.log2(p)
        # -0.0 for a single symbol
        return abs(h)

    @property
    def is_lossless(self) -> bool:
        """``True`` if decoding reproduced the input exactly."""
        return self.decoded == self.text


def _empty_result() -> EncodingResult:
    """Build the all-zero result returned for empty input.

    :returns: Result with empty mappings, empty strings and zero metrics.
    :rtype: EncodingResult
    """
    return EncodingResult(
        text="",
        frequencies=MappingProxyType({}),
        codes=MappingProxyType({}),
        encoded="",
        decoded="",
        original_size=0,
        compressed_size=0,
        compression_ratio=0.0,
    )


def encode(text: str) -> EncodingResult:
    """Huffman-encode ``text`` and decode it back for verification.

    Each character is one symbol. Empty text gives an all-zero result.

    :param text: Text to encode.
    :type text: str
    :returns: Frequencies, codes, encoded and decoded strings and size metrics.
    :rtype: EncodingResult
    :raises TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError("Input text must be a string.")
    if not text:
        return _empty_result()

    frequencies = count_frequencies(text)
    root = build_tree(frequencies)
    codes = generate_codes(root)
    encoded = encode_text(text, codes)
    decoded = decode_bits(encoded, root)

    original_size = len(text) * BITS_PER_CHAR
    compressed_size = len(encoded)
    return EncodingResult(
        text=text,
        frequencies=MappingProxyType(frequencies),
        codes=MappingProxyType(codes),
        encoded=encoded,
        decoded=decoded,
        original_size=original_size,
        compressed_size=compressed_size,
        compression_ratio=compressed_size / original_size * 100,
    )
