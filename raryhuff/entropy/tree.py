import heapq
import logging
from dataclasses import dataclass
from itertools import count
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

DUMMY_SYMBOL = -1


@dataclass(frozen=True)
class Leaf:
    probability: float
    symbol: int

    @property
    def is_dummy(self):
        return self.symbol == DUMMY_SYMBOL


@dataclass(frozen=True)
class Internal:
    probability: float
    children: Tuple["Node", ...]


Node = Union[Leaf, Internal]


def num_dummies(num_leaves: int, r: int) -> int:
    """
    Number of zero-probability pads needed so that repeatedly merging
    r nodes into one ends with exactly one node, i.e. the smallest d
    with (num_leaves + d - 1) % (r - 1) == 0.
    """
    if num_leaves <= 1:
        return 0
    return (-(num_leaves - 1)) % (r - 1)


def build_huffman_tree(support: Sequence[int], probabilities: Sequence[float], r: int) -> Optional[Node]:
    """
    Builds the r-ary Huffman tree over the symbols in support by greedily
    merging the r least probable nodes until one node is left.

    Heap entries are (probability, sequence, node). The sequence number
    grows with every push, so equal probabilities pop in insertion order:
    real leaves by ascending index, then pads, then internal nodes in the
    order they were created.

    support: indices of the symbols to code, all with positive probability
    probabilities: probability of every symbol, indexed by symbol
    r: base of the code alphabet, r >= 2

    returns
        root: the root node, a bare Leaf for a single symbol, or None
              when support is empty
    """
    if len(support) == 0:
        return None

    sequence = count()
    heap = [(probabilities[i], next(sequence), Leaf(probabilities[i], i)) for i in support]

    pads = num_dummies(len(heap), r)
    for _ in range(pads):
        heap.append((0.0, next(sequence), Leaf(0.0, DUMMY_SYMBOL)))
    heapq.heapify(heap)

    merges = 0
    while len(heap) > 1:
        children = [heapq.heappop(heap)[2] for _ in range(min(r, len(heap)))]
        total = sum(child.probability for child in children)
        heapq.heappush(heap, (total, next(sequence), Internal(total, tuple(children))))
        merges += 1

    logger.debug("built %d-ary tree: %d leaves, %d pads, %d merges", r, len(support), pads, merges)
    return heap[0][2]
