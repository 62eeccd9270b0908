import io
import sys

import pytest

from raryhuff.cli import EXIT_INVALID_INPUT, EXIT_MALFORMED, main, read_source
from raryhuff.entropy import InvalidBase


def run(monkeypatch, capsys, text, argv=()):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    status = main(list(argv))
    out, err = capsys.readouterr()
    return status, out, err


def test_report(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, "2\n3\n0.5 0.25 0.25\n")
    assert status == 0
    assert err == ""
    assert "Generated Huffman Codes:" in out
    assert "Message 0 (p = 0.5): 0\n" in out
    assert "Message 1 (p = 0.25): 10\n" in out
    assert "Message 2 (p = 0.25): 11\n" in out
    assert "Entropy: 1.500 bits" in out
    assert "Average Code Length: 1.500 bits" in out
    assert "Efficiency: 1.000" in out


def test_no_prompts_when_piped(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, "2 1 1.0")
    assert "Enter" not in out


def test_zero_probability_messages_are_not_listed(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, "3 4 0.5 0 0.3 0.2")
    assert status == 0
    assert "Message 1" not in out
    assert "3-ary digits" in out


def test_base_flag_and_precision(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, "4\n0.4 0.35 0.2 0.05\n", ["-r", "2", "--precision", "4"])
    assert status == 0
    assert "Entropy: 1.7394 bits" in out
    assert "Average Code Length: 1.8500 bits" in out
    assert "Efficiency: 0.9402" in out


@pytest.mark.parametrize("text, message", [
    ("1\n2\n0.5 0.5\n", "r must be at least 2"),
    ("2\n3\n0.5 0.3 0.1\n", "sum to 1"),
    ("2\n3\n-0.1 0.6 0.5\n", "negative"),
    ("2\n0\n", "at least one"),
])
def test_invalid_input_exits_nonzero(monkeypatch, capsys, text, message):
    status, out, err = run(monkeypatch, capsys, text)
    assert status == EXIT_INVALID_INPUT
    assert err.startswith("Error: ")
    assert message in err
    assert "Generated Huffman Codes" not in out


@pytest.mark.parametrize("text", ["two 1 1.0", "2 3 0.5 0.5", "2 2 0.5 half", ""])
def test_malformed_input(monkeypatch, capsys, text):
    status, _, err = run(monkeypatch, capsys, text)
    assert status == EXIT_MALFORMED
    assert err.startswith("Error: ")


def test_read_source_prompts_when_interactive(capsys):
    r, probs = read_source(io.StringIO("3\n2\n0.5\n0.5\n"), interactive=True)
    out, _ = capsys.readouterr()
    assert (r, probs) == (3, [0.5, 0.5])
    assert "Enter r (base of the Huffman code): " in out
    assert "Enter the number of messages: " in out
    assert "Enter the probabilities of each message:\n" in out


def test_plot_flag(monkeypatch, capsys):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    status, _, _ = run(monkeypatch, capsys, "2 2 0.5 0.5", ["--plot"])
    assert status == 0
    assert shown == [True]
    plt.close("all")


def test_base_rejected_before_message_count(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, "1\n")
    assert status == EXIT_INVALID_INPUT
    assert "r must be at least 2" in err


def test_base_flag_rejected_before_reading(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, "", ["-r", "40"])
    assert status == EXIT_INVALID_INPUT
    assert "r must be at most 36" in err


def test_interactive_session_stops_after_bad_base(capsys):
    with pytest.raises(InvalidBase):
        read_source(io.StringIO("1\n3\n0.5 0.3 0.2\n"), interactive=True)
    out, _ = capsys.readouterr()
    assert "Enter r (base of the Huffman code): " in out
    assert "Enter the number of messages" not in out


def test_negative_precision_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 1 1.0"))
    with pytest.raises(SystemExit) as excinfo:
        main(["--precision", "-1"])
    assert excinfo.value.code == 2
    _, err = capsys.readouterr()
    assert "must be non-negative" in err


def test_zero_precision(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, "2 3 0.5 0.25 0.25", ["--precision", "0"])
    assert status == 0
    assert "Average Code Length: 2 bits" in out
