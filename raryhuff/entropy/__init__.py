from raryhuff.entropy.validation import (
    HuffmanInputError,
    InvalidBase,
    EmptyAlphabet,
    NegativeProbability,
    ProbabilitiesDoNotSumToOne,
    validate,
    validate_base,
)
from raryhuff.entropy.tree import DUMMY_SYMBOL, Leaf, Internal, build_huffman_tree, num_dummies
from raryhuff.entropy.codebook import DIGITS, extract_codebook, codeword_lengths, is_prefix_free
from raryhuff.entropy.entropy import calc_entropy, calc_avg_length, calc_efficiency, calc_redundancy, kraft_sum
from raryhuff.entropy.huffman import HuffmanCoder, HuffmanResult, compute
