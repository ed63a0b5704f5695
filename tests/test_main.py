import json
import os

import pytest

from linreg.dataset import write_training_csv
from main import main


def test_default_run_prints_range(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.startswith("-" * 80 + "\n")
    assert out.count("Input: ") == 21
    assert "Input: -10.0\nPredicted output: -98.0\n" in out
    assert "Input: 10.0\nPredicted output: 102.0\n" in out


def test_all_mode_with_csv(tmp_path, capsys):
    path = write_training_csv([1.0, 2.0, 3.0], [3.0, 5.0, 7.0], str(tmp_path / "pairs.csv"))
    main(["--mode", "all", "--input", path, "--epochs", "20", "--seed", "0", "--decimals", "2"])
    out = capsys.readouterr().out
    assert out.count("Input: ") == 3
    assert "Input: 1.00\n" in out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "cfg.json"
    path.write_text(
        json.dumps({"epochs": 5000, "range_min": 0, "range_max": 4, "step": 2.0, "seed": 1}),
        encoding="utf-8",
    )
    main(["--config", str(path)])
    out = capsys.readouterr().out
    assert out.count("Input: ") == 3
    assert "Input: 4.0\nPredicted output: 42.0\n" in out


def test_invalid_range_from_config(tmp_path, capsys):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"epochs": 1, "range_min": 5, "range_max": 1}), encoding="utf-8")
    main(["--config", str(path)])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_compare_mode(tmp_path):
    main(["--mode", "compare", "--epochs", "100", "--seed", "0", "--results-dir", str(tmp_path)])
    run_dirs = os.listdir(tmp_path / "compare")
    assert len(run_dirs) == 1
    assert os.path.exists(tmp_path / "compare" / run_dirs[0] / "metrics.csv")


def test_convergence_mode(tmp_path):
    main(["--mode", "convergence", "--epochs", "50", "--seed", "0", "--results-dir", str(tmp_path)])
    assert os.path.exists(tmp_path / "figures" / "convergence_summary.csv")


def test_unknown_mode():
    with pytest.raises(SystemExit):
        main(["--mode", "train"])
