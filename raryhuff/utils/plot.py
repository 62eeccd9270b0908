import matplotlib.pyplot as plt


def plot_codeword_lengths(result, ax=None):
    """
    Draws a bar chart of codeword length per symbol index for the
    symbols that received a codeword.

    result: HuffmanResult from compute()
    ax: matplotlib Axes to draw into; a new figure is created if None

    returns
        ax: the Axes holding the chart
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    symbols = sorted(result.codebook)
    lengths = [len(result.codebook[s]) for s in symbols]

    ax.bar(symbols, lengths, width=0.8)
    ax.set_title(f"{result.base}-ary Huffman Codeword Lengths")
    ax.set_xlabel("Message index")
    ax.set_ylabel("Codeword length (digits)")
    ax.set_xticks(symbols)
    ax.grid(True, axis="y")
    return ax
