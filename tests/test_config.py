import json
import os

import pytest

from linreg.config import DEFAULT_CONFIG_PATH, TrainingConfig, load_config, save_config

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_defaults_match_driver_run():
    config = TrainingConfig()
    assert config.train_in == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert config.train_out == [2.0, 12.0, 22.0, 32.0, 42.0]
    assert config.epochs == 10000
    assert config.learning_rate == 0.01
    assert (config.range_min, config.range_max, config.step) == (-10.0, 10.0, 1.0)
    assert config.num_decimals == 1


def test_shipped_config_matches_defaults():
    config = load_config(os.path.join(ROOT, DEFAULT_CONFIG_PATH))
    assert config == TrainingConfig()


def test_save_and_load(tmp_path):
    config = TrainingConfig(epochs=50, learning_rate=0.05, seed=3)
    path = save_config(config, str(tmp_path / "cfg.json"))
    assert load_config(path) == config


def test_partial_config_uses_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"epochs": 5}), encoding="utf-8")
    config = load_config(str(path))
    assert config.epochs == 5
    assert config.learning_rate == 0.01


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"epochs": 5, "momentum": 0.9}), encoding="utf-8")
    with pytest.raises(ValueError, match="momentum"):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))
