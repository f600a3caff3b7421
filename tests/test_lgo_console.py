"""
Tests for the command-line entry point.
"""

import pytest

import lgo_console
from lgo_arith import add_strings
from lgo_predictor import predict_next
from lgo_store import SequenceStore


class TestBatchMode:
    """--start / --resume headless runs."""

    def test_start(self, seq_file, capsys):
        lgo_console.main(["--file", seq_file, "--start", "9999999967", "--steps", "5"])
        values = SequenceStore(seq_file).read_values()
        assert len(values) == 5
        assert values[0] == "9999999971"
        out = capsys.readouterr().out
        assert "Predictions made: 5" in out
        assert "Last PNT ratio:" in out

    def test_resume_continues_sequence(self, seq_file):
        lgo_console.main(["--file", seq_file, "--start", "999999999999991", "--steps", "2"])
        last = SequenceStore(seq_file).load_last()
        lgo_console.main(["--file", seq_file, "--resume", "--steps", "3"])
        values = SequenceStore(seq_file).read_values()
        assert len(values) == 5
        gap, expected, _ = predict_next(last)
        assert values[2] == expected == add_strings(last, gap)

    def test_zero_steps(self, seq_file, capsys):
        lgo_console.main(["--file", seq_file, "--start", "7", "--steps", "0"])
        assert SequenceStore(seq_file).load_last() is None
        assert "Predictions made: 0" in capsys.readouterr().out

    def test_resume_without_values_fails(self, seq_file, capsys):
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, "--resume"])
        assert exc.value.code == 1
        assert "no value to resume" in capsys.readouterr().err

    @pytest.mark.parametrize("value", ["12a", "", "-4"])
    def test_invalid_start_fails(self, seq_file, capsys, value):
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, f"--start={value}"])
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_negative_steps_fails(self, seq_file):
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, "--start", "7", "--steps", "-1"])
        assert exc.value.code == 1

    def test_unwritable_file_fails(self, tmp_path, capsys):
        seq_file = str(tmp_path / "missing" / "lgo_sequence.txt")
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, "--start", "7", "--steps", "3"])
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_modes_are_exclusive(self, seq_file):
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, "--start", "7", "--plot"])
        assert exc.value.code == 2


class TestPlotMode:
    """--plot reads the whole sequence file."""

    def test_plot_saves_figure(self, seq_file, tmp_path):
        lgo_console.main(["--file", seq_file, "--start", "9999999967", "--steps", "10"])
        out = tmp_path / "plot.png"
        lgo_console.main(["--file", seq_file, "--plot", "--save", str(out)])
        assert out.exists()

    def test_plot_file_with_several_runs(self, seq_file, tmp_path, capsys):
        lgo_console.main(["--file", seq_file, "--start", "9999999967", "--steps", "3"])
        lgo_console.main(["--file", seq_file, "--start", "9999999999999999997", "--steps", "3"])
        lgo_console.main(["--file", seq_file, "--start", "999999999999991", "--steps", "3"])
        out = tmp_path / "runs.png"
        lgo_console.main(["--file", seq_file, "--plot", "--save", str(out)])
        assert out.exists()
        assert "Plot written to" in capsys.readouterr().out

    def test_plot_missing_file_fails(self, seq_file, capsys):
        with pytest.raises(SystemExit) as exc:
            lgo_console.main(["--file", seq_file, "--plot"])
        assert exc.value.code == 1
        assert "Cannot read sequence file" in capsys.readouterr().err


class TestInteractiveMode:
    """Menu -> run -> menu, with curses replaced by a fake window."""

    def test_runs_until_quit(self, seq_file, make_window, monkeypatch, capsys):
        answers = ["9999999967", "23", None]

        class ScriptedSelector:
            def __init__(self, store):
                self.store = store

            def select(self):
                return answers.pop(0)

        windows = [make_window(keys=[-1, -1, ord("s")]), make_window(keys=[ord("S")])]

        def wrapper(func, *args):
            return func(windows.pop(0), *args)

        monkeypatch.setattr(lgo_console, "InputSelector", ScriptedSelector)
        monkeypatch.setattr(lgo_console.curses, "wrapper", wrapper)

        total = lgo_console.run_interactive(SequenceStore(seq_file), delay=0)
        assert total == 2
        assert SequenceStore(seq_file).read_values() == ["9999999971", "9999999973"]
        out = capsys.readouterr().out
        assert "Stopped after 2 predictions" in out
        assert "Stopped after 0 predictions" in out
        assert "Total Predictions: 2" in out
