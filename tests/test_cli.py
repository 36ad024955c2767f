"""Tests for the command-line interface."""

import json

import matplotlib
matplotlib.use("Agg")

import pytest
from seedoku.cli import main


class TestGenerateCommand:
    """Tests for `seedoku generate`."""
    
    def test_solved_json(self, capsys):
        """The solved grid is printed as JSON."""
        main(["generate", "--seed", "42", "--solved", "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data["seed"] == 42
        assert data["values"][0] == [8, 4, 9, 6, 5, 3, 1, 2, 7]
    
    def test_puzzle_text(self, capsys):
        """The puzzle is pretty-printed with its revealed count."""
        main(["generate", "--seed", "42", "--complexity", "hard"])
        out = capsys.readouterr().out
        assert "Hard puzzle for seed 42 (21 revealed)" in out
        assert "| 8 4 . | . . 3 | . . . |" in out
    
    def test_default_complexity_is_medium(self, capsys):
        """Medium is used when no complexity is given."""
        main(["generate", "--seed", "42", "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data["complexity"] == "medium"
        assert data["revealed"] == 35
    
    def test_output_file(self, tmp_path, capsys):
        """Output can be written to a file."""
        path = tmp_path / "puzzle.json"
        main(["generate", "--seed", "42", "-c", "easy", "-f", "json", "-o", str(path)])
        data = json.loads(path.read_text())
        assert data["revealed"] == 44
        assert "Saved to" in capsys.readouterr().out
    
    def test_exhausted_exit_code(self, capsys):
        """Hitting the attempt limit exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--seed", "42", "--max-attempts", "1"])
        assert exc_info.value.code == 1
        assert "Could not generate" in capsys.readouterr().err
    
    @pytest.mark.parametrize("value", ["0", "-3", "many"])
    def test_non_positive_max_attempts_rejected(self, value, capsys):
        """argparse rejects attempt limits below one."""
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--seed", "1", "--max-attempts", value])
        assert exc_info.value.code == 2
        assert "--max-attempts" in capsys.readouterr().err

    def test_invalid_complexity_rejected(self):
        """argparse rejects unknown complexities."""
        with pytest.raises(SystemExit):
            main(["generate", "--seed", "1", "--complexity", "expert"])


class TestBenchmarkCommand:
    """Tests for `seedoku benchmark`."""
    
    def test_benchmark_writes_results(self, tmp_path, capsys):
        """Benchmark saves JSON results without charts."""
        main(["benchmark", "--count", "2", "--start-seed", "2",
              "--output", str(tmp_path), "--no-charts"])
        out = capsys.readouterr().out
        assert "Completed: 2/2" in out
        assert (tmp_path / "generation_results.json").exists()
        assert (tmp_path / "generation_summary.json").exists()

    def test_zero_count_rejected(self, tmp_path):
        """At least one seed is required."""
        with pytest.raises(SystemExit) as exc_info:
            main(["benchmark", "--count", "0", "--output", str(tmp_path)])
        assert exc_info.value.code == 2


def test_no_command():
    """Running without a command prints help and exits."""
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
