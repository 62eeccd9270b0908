import numpy as np


def calc_entropy(pmf, base=2):
    """
    Computes entropy for the given probability mass function
    with the formula SUM{ p(x) * log_r(1 / p(x)) } where r is the base.
    Bins with zero probability contribute nothing.

    pmf: np.array of shape [B] containing the probabilities for bins
    base: base r of the logarithm, i.e. the size of the code alphabet

    returns
        entropy: scalar value in r-ary digits per symbol
    """
    pmf = np.asarray(pmf, dtype=np.float64)
    nonzero_pmf = pmf[pmf > 0]

    entropy = np.sum(nonzero_pmf * (np.log(1.0 / nonzero_pmf) / np.log(base)))
    return float(entropy)


def calc_avg_length(codebook, pmf):
    """
    Computes the expected codeword length SUM{ p(x) * len(code(x)) }
    over the symbols that have a codeword.

    codebook: dict mapping symbol index -> codeword string
    pmf: np.array of shape [B] containing the probabilities for bins

    returns
        avg_length: scalar value in r-ary digits per symbol
    """
    pmf = np.asarray(pmf, dtype=np.float64)
    if not codebook:
        return 0.0
    symbols = np.fromiter(codebook.keys(), dtype=np.int64)
    lengths = np.fromiter((len(code) for code in codebook.values()), dtype=np.float64)
    return float(np.sum(pmf[symbols] * lengths))


def calc_efficiency(entropy, avg_length):
    """Ratio entropy / avg_length, or None when avg_length is zero."""
    if avg_length <= 0:
        return None
    return entropy / avg_length


def calc_redundancy(entropy, avg_length):
    return avg_length - entropy


def kraft_sum(codebook, base=2):
    """
    SUM{ r^(-len(code(x))) } over all codewords. A prefix code over an
    alphabet of size r always has a Kraft sum of at most 1.
    """
    lengths = np.fromiter((len(code) for code in codebook.values()), dtype=np.float64)
    return float(np.sum(np.power(float(base), -lengths)))
