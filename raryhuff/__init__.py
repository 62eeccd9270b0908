from raryhuff.entropy import (
    HuffmanCoder,
    HuffmanResult,
    HuffmanInputError,
    InvalidBase,
    EmptyAlphabet,
    NegativeProbability,
    ProbabilitiesDoNotSumToOne,
    compute,
)

__version__ = "0.1.0"
