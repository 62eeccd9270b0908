import argparse
import logging
import sys

from raryhuff.entropy import HuffmanInputError, compute, validate_base

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 1
EXIT_MALFORMED = 2


class MalformedInput(Exception):
    pass


def iter_tokens(stream):
    for line in stream:
        yield from line.split()


def _next_number(tokens, kind, what):
    token = next(tokens, None)
    if token is None:
        raise MalformedInput(f"unexpected end of input while reading {what}")
    try:
        return kind(token)
    except ValueError:
        raise MalformedInput(f"expected {kind.__name__} for {what}, got {token!r}") from None


def read_source(stream, base=None, interactive=False):
    """
    Reads r (unless given), the number of messages n, then n probabilities
    from a whitespace separated text stream.

    returns
        r: int
        probabilities: list of n floats

    raises
        InvalidBase as soon as r is known, before n is read
    """
    def prompt(text, end=""):
        if interactive:
            print(text, end=end, flush=True)

    tokens = iter_tokens(stream)
    if base is None:
        prompt("Enter r (base of the Huffman code): ")
        base = _next_number(tokens, int, "r")
    base = validate_base(base)

    prompt("Enter the number of messages: ")
    n = _next_number(tokens, int, "the number of messages")

    prompt("Enter the probabilities of each message:", end="\n")
    probabilities = [_next_number(tokens, float, f"probability {i}") for i in range(max(n, 0))]
    return base, probabilities


def _unit(r):
    return "bits" if r == 2 else f"{r}-ary digits"


def print_report(result, precision=3):
    print("\nGenerated Huffman Codes:")
    for i, p in enumerate(result.probabilities):
        if i in result.codebook:
            print(f"Message {i} (p = {p}): {result.codebook[i]}")

    unit = _unit(result.base)
    efficiency = "N/A" if result.efficiency is None else f"{result.efficiency:.{precision}f}"
    print(f"\nEntropy: {result.entropy:.{precision}f} {unit}")
    print(f"Average Code Length: {result.avg_length:.{precision}f} {unit}")
    print(f"Efficiency: {efficiency}")


def non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser():
    ap = argparse.ArgumentParser(
        prog="raryhuff",
        description="Build an optimal r-ary Huffman code from message probabilities read on stdin.",
    )
    ap.add_argument("-r", "--base", type=int, default=None, help="code alphabet size (prompted for if omitted)")
    ap.add_argument("--precision", type=non_negative_int, default=3, help="decimal places for the metrics (default 3)")
    ap.add_argument("--plot", action="store_true", help="show a bar chart of the codeword lengths")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        r, probabilities = read_source(sys.stdin, base=args.base, interactive=sys.stdin.isatty())
        result = compute(r, probabilities)
    except MalformedInput as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MALFORMED
    except HuffmanInputError as e:
        logger.debug("rejected input: %s", type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print_report(result, precision=args.precision)

    if args.plot:
        import matplotlib.pyplot as plt
        from raryhuff.utils import plot_codeword_lengths

        plot_codeword_lengths(result)
        plt.tight_layout()
        plt.show()
    return 0
