import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from raryhuff.entropy import compute
from raryhuff.utils import plot_codeword_lengths


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_one_bar_per_codeword():
    result = compute(4, [0.4, 0.2, 0.2, 0.1, 0.1])
    ax = plot_codeword_lengths(result)
    heights = [patch.get_height() for patch in ax.patches]
    assert heights == [1, 1, 1, 2, 2]
    assert "4-ary" in ax.get_title()


def test_draws_into_given_axes():
    _, ax = plt.subplots()
    result = compute(2, [0.5, 0.0, 0.5])
    assert plot_codeword_lengths(result, ax=ax) is ax
    assert len(ax.patches) == 2
