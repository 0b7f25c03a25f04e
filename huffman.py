import heapq
import itertools
from typing import Dict, List, Optional, Tuple


class HuffmanNode:
    """Node for a binary Huffman tree.

    Nodes are built bottom-up and never modified afterwards; assigning to an
    attribute of a constructed node raises :class:`AttributeError`.

    :ivar symbol: The character stored at a leaf; ``None`` for internal nodes.
    :type symbol: str | None
    :ivar weight: Frequency of the symbol, or sum of the children's weights.
    :type weight: int
    :ivar left: Left child node (reached by bit ``'0'``).
    :type left: HuffmanNode | None
    :ivar right: Right child node (reached by bit ``'1'``).
    :type right: HuffmanNode | None
    """

    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol=None, weight=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol for leaf nodes; ``None`` for internal nodes.
        :type symbol: str | None
        :param int weight: Weight associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        object.__setattr__(self, "symbol", symbol)
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    def __setattr__(self, name, value):
        """Reject attribute assignment; nodes are fixed once built.

        :param str name: Attribute name.
        :param value: Ignored.
        :returns: Never returns.
        :rtype: None
        :raises AttributeError: Always.
        """
        raise AttributeError(f"HuffmanNode is immutable (cannot set {name!r})")

    def __repr__(self):
        """Show the symbol (leaves only) and weight.

        :returns: Debug representation.
        :rtype: str
        """
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight})"

    @property
    def is_leaf(self) -> bool:
        """``True`` if the node carries a symbol."""
        return self.symbol is not None


class PriorityQueue:
    """Min-heap of :class:`HuffmanNode` ordered by weight.

    Equal weights come out in insertion order, so a given frequency table
    always produces the same tree.
    """

    def __init__(self):
        """Create an empty queue.

        :returns: None
        :rtype: None
        """
        self._heap: List[Tuple[int, int, HuffmanNode]] = []
        self._counter = itertools.count()

    def insert(self, node: HuffmanNode):
        """Add ``node`` to the queue in O(log n).

        :param node: Node to insert.
        :type node: HuffmanNode
        :returns: None
        :rtype: None
        """
        heapq.heappush(self._heap, (node.weight, next(self._counter), node))

    def extract_min(self) -> Optional[HuffmanNode]:
        """Remove and return a node of minimum weight.

        :returns: The lightest node, or ``None`` if the queue is empty.
        :rtype: HuffmanNode | None
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def size(self) -> int:
        """Return the number of queued nodes.

        :rtype: int
        """
        return len(self._heap)

    def __len__(self):
        """Same as :meth:`size`.

        :rtype: int
        """
        return len(self._heap)


def count_frequencies(text: str) -> Dict[str, int]:
    """Count occurrences of each character of ``text``.

    Keys appear in order of first occurrence.

    :param text: Input text.
    :type text: str
    :returns: Mapping from symbol to its count; empty for empty text.
    :rtype: Dict[str, int]
    """
    frequencies: Dict[str, int] = {}
    for ch in text:
        frequencies[ch] = frequencies.get(ch, 0) + 1
    return frequencies


def build_tree(frequencies: Dict[str, int]) -> Optional[HuffmanNode]:
    """Build a Huffman tree by repeatedly merging the two lightest nodes.

    A table with a single symbol yields an internal root whose only child is
    the leaf, on the left, so the symbol still gets a one-bit code.

    :param frequencies: Mapping from symbol to observed frequency.
    :type frequencies: Dict[str, int]
    :returns: Root of the tree, or ``None`` for an empty table.
    :rtype: HuffmanNode | None
    """
    queue = PriorityQueue()
    for symbol, freq in frequencies.items():
        queue.insert(HuffmanNode(symbol=symbol, weight=freq))

    if queue.size() == 0:
        return None

    if queue.size() == 1:
        leaf = queue.extract_min()
        return HuffmanNode(weight=leaf.weight, left=leaf)

    while queue.size() > 1:
        left = queue.extract_min()
        right = queue.extract_min()
        queue.insert(
            HuffmanNode(weight=left.weight + right.weight, left=left, right=right)
        )

    return queue.extract_min()


def generate_codes(root: Optional[HuffmanNode]) -> Dict[str, str]:
    """Assign each leaf the bit string of its path from ``root``.

    :param root: Tree root as returned by :func:`build_tree`.
    :type root: HuffmanNode | None
    :returns: Mapping from symbol to its code.
    :rtype: Dict[str, str]
    """
    codes: Dict[str, str] = {}
    if root is None:
        return codes

    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path or "0"
            continue
        # right first so the left subtree is visited first
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))
    return codes


def encode_text(text: str, codes: Dict[str, str]) -> str:
    """Concatenate the codes of every symbol of ``text``.

    :param text: Text to encode.
    :type text: str
    :param codes: Code table covering every symbol of ``text``.
    :type codes: Dict[str, str]
    :returns: Encoded bit string.
    :rtype: str
    :raises KeyError: If a symbol of ``text`` has no code.
    """
    return "".join(codes[ch] for ch in text)


def decode_bits(bits: str, root: Optional[HuffmanNode], strict: bool = False) -> str:
    """Decode a bit string by walking the tree from ``root``.

    Each bit moves one level down (``'0'`` left, ``'1'`` right); reaching a
    leaf emits its symbol and restarts at the root.

    In the default mode any character other than ``'0'`` is read as ``'1'``,
    a step into a missing child restarts at the root and an incomplete
    trailing code is dropped. With ``strict`` all three are errors.

    :param bits: Encoded bit string.
    :type bits: str
    :param root: Root of the tree the bits were encoded with.
    :type root: HuffmanNode | None
    :param bool strict: Reject malformed input instead of skipping over it.
    :returns: Decoded text.
    :rtype: str
    :raises ValueError: In strict mode, if ``bits`` is not a valid sequence of
        complete codes for this tree.
    """
    if not bits:
        return ""
    if root is None:
        if strict:
            raise ValueError("Cannot decode bits without a tree")
        return ""

    out: List[str] = []
    current = root
    for pos, bit in enumerate(bits):
        if bit == "0":
            nxt = current.left
        elif bit == "1":
            nxt = current.right
        elif strict:
            raise ValueError(f"Invalid bit {bit!r} at position {pos}")
        else:
            nxt = current.right

        if nxt is None:
            if strict:
                raise ValueError(f"No code matches the bits ending at position {pos}")
            current = root
            continue

        if nxt.is_leaf:
            out.append(nxt.symbol)
            current = root
        else:
            current = nxt

    if strict and current is not root:
        raise ValueError("Trailing bits do not form a complete code")
    return "".join(out)
