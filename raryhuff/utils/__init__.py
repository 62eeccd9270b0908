from raryhuff.utils.plot import plot_codeword_lengths
