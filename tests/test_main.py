"""Tests for the guard-patrol command line entry point."""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from guard_patrol.main import main
from guard_patrol.model.strategy import SimpleStepPattern


class SlowStep(SimpleStepPattern):
    """Reference movement with a fixed delay per step."""

    def step(self, guard, context) -> None:
        time.sleep(0.002)
        super().step(guard, context)


def _grid(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "grid.txt"
    path.write_text(text)
    return path


class TestMain:
    def test_quiet_run_writes_exports(self, tmp_path: Path, example_text: str) -> None:
        grid = _grid(tmp_path, example_text)
        out = tmp_path / "out"
        assert main(["--input", str(grid), "--out-dir", str(out), "--quiet"]) == 0
        assert (out / "trajectory.csv").exists()
        assert (out / "final_state.png").exists()
        obstacles = (out / "loop_obstacles.csv").read_text().splitlines()
        assert obstacles[0] == "x,y"
        assert len(obstacles) == 7

    def test_report_printed(self, tmp_path: Path, example_text: str,
                            capsys: pytest.CaptureFixture) -> None:
        grid = _grid(tmp_path, example_text)
        code = main(["--input", str(grid), "--out-dir", str(tmp_path / "out"),
                     "--no-csv", "--no-snapshot", "--ascii"])
        assert code == 0
        stdout = capsys.readouterr().out
        assert "Distinct Cells:        41" in stdout
        assert "Loop-Inducing Cells:   6" in stdout
        assert "....#....." in stdout

    def test_no_search(self, tmp_path: Path, example_text: str,
                       capsys: pytest.CaptureFixture) -> None:
        grid = _grid(tmp_path, example_text)
        out = tmp_path / "out"
        assert main(["--input", str(grid), "--out-dir", str(out),
                     "--no-search", "--no-snapshot"]) == 0
        assert not (out / "loop_obstacles.csv").exists()
        assert "Search:                (disabled)" in capsys.readouterr().out

    def test_config_file(self, tmp_path: Path, example_text: str) -> None:
        _grid(tmp_path, example_text)
        config = tmp_path / "patrol.yaml"
        config.write_text("input: grid.txt\nsearch:\n  enabled: false\n"
                          "export:\n  snapshot: false\n")
        out = tmp_path / "out"
        assert main(["--config", str(config), "--out-dir", str(out), "--quiet"]) == 0
        assert (out / "trajectory.csv").exists()
        assert not (out / "final_state.png").exists()

    def test_extra_guards_warned(self, tmp_path: Path,
                                 capsys: pytest.CaptureFixture) -> None:
        grid = _grid(tmp_path, "^..\n..^\n")
        assert main(["--input", str(grid), "--out-dir", str(tmp_path / "out"),
                     "--no-csv", "--no-snapshot", "--no-search"]) == 0
        assert "1 extra guard marker(s) ignored: (2, 1)" in capsys.readouterr().out

    def test_malformed_grid_fails(self, tmp_path: Path,
                                  capsys: pytest.CaptureFixture) -> None:
        grid = _grid(tmp_path, "..x\n.^.\n")
        assert main(["--input", str(grid), "--quiet"]) == 1
        assert "Error parsing grid" in capsys.readouterr().err

    def test_missing_guard_fails(self, tmp_path: Path) -> None:
        grid = _grid(tmp_path, "...\n.#.\n")
        assert main(["--input", str(grid), "--quiet"]) == 1

    def test_missing_input_fails(self, tmp_path: Path,
                                 capsys: pytest.CaptureFixture) -> None:
        assert main(["--input", str(tmp_path / "nope.txt"), "--quiet"]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_bad_worker_count_fails(self, tmp_path: Path, example_text: str) -> None:
        grid = _grid(tmp_path, example_text)
        assert main(["--input", str(grid), "--workers", "0", "--quiet"]) == 1

    def test_source_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_non_utf8_input_fails(self, tmp_path: Path,
                                  capsys: pytest.CaptureFixture) -> None:
        grid = tmp_path / "grid.txt"
        grid.write_bytes(b"..\xff\n.^.\n")
        assert main(["--input", str(grid), "--quiet"]) == 1
        assert "Error parsing grid" in capsys.readouterr().err

    def test_directory_input_fails(self, tmp_path: Path,
                                   capsys: pytest.CaptureFixture) -> None:
        assert main(["--input", str(tmp_path), "--quiet"]) == 1
        assert "Error reading input" in capsys.readouterr().err

    def test_search_timeout_fails(self, tmp_path: Path, example_text: str,
                                  monkeypatch: pytest.MonkeyPatch,
                                  capsys: pytest.CaptureFixture) -> None:
        _grid(tmp_path, example_text)
        config = tmp_path / "patrol.yaml"
        config.write_text("input: grid.txt\nsearch:\n  timeout: 0.001\n")
        monkeypatch.setattr("guard_patrol.main.get_strategy",
                            lambda name: SlowStep())
        code = main(["--config", str(config), "--out-dir", str(tmp_path / "out"),
                     "--quiet"])
        assert code == 1
        assert "timeout" in capsys.readouterr().err
