"""Per-project configuration."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path

CONFIG_DIR = ".assets-shared"
CONFIG_FILE = "config.json"


@dataclass
class SharedConfig:
    # List files still importing a deleted unit
    show_deleted: bool = False

    @classmethod
    def load(cls, project_path: Path) -> "SharedConfig":
        config_path = Path(project_path) / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            data = json.loads(config_path.read_text(encoding="utf-8"))
            return cls._from_dict(data)
        return cls()

    @classmethod
    def _from_dict(cls, data: dict) -> "SharedConfig":
        return cls(show_deleted=bool(data.get("show_deleted", False)))

    def save(self, project_path: Path) -> None:
        config_dir = Path(project_path) / CONFIG_DIR
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / CONFIG_FILE
        config_path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
