import matplotlib.pyplot as plt
from raryhuff.entropy import compute, is_prefix_free
from raryhuff.utils import plot_codeword_lengths

scenarios = {
    "S1": (2, [0.5, 0.25, 0.25]),
    "S2": (2, [0.4, 0.35, 0.2, 0.05]),
    "S3": (3, [0.25, 0.25, 0.2, 0.15, 0.15]),
    "S4": (3, [0.5, 0.3, 0.2]),
    "S5": (2, [1.0]),
    "S6": (4, [0.4, 0.2, 0.2, 0.1, 0.1]),
}

if __name__ == "__main__":
    fig, axes = plt.subplots(2, 3, figsize=(15, 7))

    for ax, (name, (r, probs)) in zip(axes.flat, scenarios.items()):
        result = compute(r, probs)
        efficiency = "N/A" if result.efficiency is None else f"{result.efficiency:.3f}"

        print(f"{name}: r={r}, p={probs}")
        for symbol, code in sorted(result.codebook.items()):
            print(f"  {symbol}: {code}")
        print(f"  H={result.entropy:.3f}, L={result.avg_length:.3f}, efficiency={efficiency}")
        print(f"  Kraft sum: {result.kraft_sum:.3f}, prefix-free: {is_prefix_free(result.codebook)}\n")

        plot_codeword_lengths(result, ax=ax)
        ax.set_title(f"{name} (r={r})")

    plt.tight_layout()
    plt.show()
