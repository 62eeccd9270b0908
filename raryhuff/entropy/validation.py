import math
import numbers
import logging

logger = logging.getLogger(__name__)

SUM_TOLERANCE = 1e-6
MAX_BASE = 36


class HuffmanInputError(ValueError):
    """Base class for every rejection of a (base, probabilities) input."""


class InvalidBase(HuffmanInputError):
    pass


class EmptyAlphabet(HuffmanInputError):
    pass


class NegativeProbability(HuffmanInputError):
    pass


class ProbabilitiesDoNotSumToOne(HuffmanInputError):
    pass


def validate_base(r):
    """Checks the code alphabet size alone and returns it as a plain int."""
    if isinstance(r, bool) or not isinstance(r, numbers.Integral):
        raise InvalidBase(f"r must be an integer, got {r!r}")
    r = int(r)
    if r < 2:
        raise InvalidBase(f"r must be at least 2, got {r}")
    if r > MAX_BASE:
        raise InvalidBase(f"r must be at most {MAX_BASE}, got {r}")
    return r


def validate(r, probabilities, tolerance=SUM_TOLERANCE):
    """
    Checks that r and the probabilities describe a codable source. The
    checks run in a fixed order and the first failure is raised.

    r: integer base of the code alphabet, 2 <= r <= 36
    probabilities: sequence of n non-negative reals summing to 1

    returns
        r: the base as a plain int
        probs: tuple of n floats
        support: list of indices i with probs[i] > 0, ascending
    """
    r = validate_base(r)

    probs = tuple(float(p) for p in probabilities)
    if len(probs) < 1:
        raise EmptyAlphabet("at least one message probability is required")

    for i, p in enumerate(probs):
        if p < 0:
            raise NegativeProbability(f"probability of message {i} is negative: {p}")

    total = math.fsum(probs)
    # NaN compares false, so it lands here too
    if not abs(total - 1.0) <= tolerance:
        raise ProbabilitiesDoNotSumToOne(f"probabilities must sum to 1, got {total}")

    support = [i for i, p in enumerate(probs) if p > 0]
    logger.debug("validated r=%d, n=%d, %d symbols with p > 0", r, len(probs), len(support))
    return r, probs, support
