from itertools import combinations
from typing import Dict, Optional

from raryhuff.entropy.tree import Leaf, Node

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def extract_codebook(root: Optional[Node]) -> Dict[int, str]:
    """
    Walks the tree depth first and labels the i-th child edge of every
    internal node with DIGITS[i]. Each real leaf gets the labels on its
    path from the root as its codeword; pads are skipped.

    The path is kept in one list that is truncated and extended as the
    walk moves, and joined into a string only at leaves.

    root: tree from build_huffman_tree, possibly None

    returns
        codebook: dict mapping symbol index -> codeword
    """
    codebook = {}
    if root is None:
        return codebook
    if isinstance(root, Leaf):
        # one symbol still needs a non-empty codeword
        if not root.is_dummy:
            codebook[root.symbol] = DIGITS[0]
        return codebook

    prefix = []
    stack = [(root, 0, None)]
    while stack:
        node, depth, digit = stack.pop()
        if depth > 0:
            del prefix[depth - 1:]
            prefix.append(digit)

        if isinstance(node, Leaf):
            if not node.is_dummy:
                codebook[node.symbol] = "".join(prefix)
            continue

        for i in reversed(range(len(node.children))):
            stack.append((node.children[i], depth + 1, DIGITS[i]))

    return codebook


def codeword_lengths(codebook):
    return {symbol: len(code) for symbol, code in codebook.items()}


def is_prefix_free(codebook):
    """True if no codeword is a prefix of another one."""
    for a, b in combinations(codebook.values(), 2):
        if a.startswith(b) or b.startswith(a):
            return False
    return True
