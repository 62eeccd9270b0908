import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from raryhuff.entropy.validation import SUM_TOLERANCE, validate
from raryhuff.entropy.tree import Node, build_huffman_tree
from raryhuff.entropy.codebook import codeword_lengths, extract_codebook, is_prefix_free
from raryhuff.entropy.entropy import (
    calc_avg_length,
    calc_efficiency,
    calc_entropy,
    calc_redundancy,
    kraft_sum,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HuffmanResult:
    base: int
    probabilities: Tuple[float, ...]
    codebook: Dict[int, str] = field(hash=False)
    entropy: float
    avg_length: float
    efficiency: Optional[float]
    root: Optional[Node] = field(default=None, repr=False, compare=False)

    @property
    def redundancy(self):
        return calc_redundancy(self.entropy, self.avg_length)

    @property
    def kraft_sum(self):
        return kraft_sum(self.codebook, self.base)


def compute(r, probabilities, tolerance=SUM_TOLERANCE):
    """
    Builds the optimal r-ary prefix code for the given source and
    evaluates it.

    r: size of the code alphabet, 2 <= r <= 36
    probabilities: sequence of n non-negative reals summing to 1

    returns
        result: HuffmanResult holding the codebook (symbol index -> codeword),
                entropy in base r, expected codeword length and efficiency
                (None when the expected length is zero)

    raises
        HuffmanInputError subclass describing the first failed check
    """
    r, probs, support = validate(r, probabilities, tolerance=tolerance)

    root = build_huffman_tree(support, probs, r)
    codebook = extract_codebook(root)

    entropy = calc_entropy(probs, base=r)
    avg_length = calc_avg_length(codebook, probs)
    efficiency = calc_efficiency(entropy, avg_length)
    logger.debug("r=%d: H=%.6f, L=%.6f, efficiency=%s", r, entropy, avg_length, efficiency)

    return HuffmanResult(
        base=r,
        probabilities=probs,
        codebook=codebook,
        entropy=entropy,
        avg_length=avg_length,
        efficiency=efficiency,
        root=root,
    )


class HuffmanCoder:

    def __init__(self, base=2, tolerance=SUM_TOLERANCE):
        self.base = base
        self.tolerance = tolerance
        self.result = None

    def train(self, probs):
        """Builds the code for the probability mass function probs."""
        self.result = compute(self.base, probs, tolerance=self.tolerance)

    def _trained(self, action):
        if self.result is None:
            raise RuntimeError(f"Train the Huffman coder before {action}.")
        return self.result

    @property
    def codewords(self):
        return dict(self._trained("reading codewords").codebook)

    @property
    def codelengths(self):
        return codeword_lengths(self._trained("reading code lengths").codebook)

    def codeword(self, symbol):
        codebook = self._trained("looking up codewords").codebook
        if symbol not in codebook:
            raise KeyError(f"Symbol {symbol} has no codeword (zero probability or out of range).")
        return codebook[symbol]

    def is_prefix_free(self):
        return is_prefix_free(self._trained("checking the code").codebook)
