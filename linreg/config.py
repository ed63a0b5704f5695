import json
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional

DEFAULT_CONFIG_PATH = "config/train_config.json"


@dataclass
class TrainingConfig:
    train_in: List[float] = field(default_factory=lambda: [0.0, 1.0, 2.0, 3.0, 4.0])
    train_out: List[float] = field(default_factory=lambda: [2.0, 12.0, 22.0, 32.0, 42.0])
    epochs: int = 10000
    learning_rate: float = 0.01
    range_min: float = -10.0
    range_max: float = 10.0
    step: float = 1.0
    num_decimals: int = 1
    seed: Optional[int] = None
    data_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> TrainingConfig:
    with open(config_path, "r", encoding="utf-8") as handle:
        return TrainingConfig.from_dict(json.load(handle))


def save_config(config: TrainingConfig, config_path: str) -> str:
    with open(config_path, "w", encoding="utf-8") as handle:
        json.dump(config.to_dict(), handle, indent=2)
    return config_path
