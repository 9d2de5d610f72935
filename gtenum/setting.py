from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

from gtenum.core.mixin import JsonMixin

logger = logging.getLogger("setting")

APPDIR = Path.home() / ".gtenum"
SETTING_FILE = APPDIR / "setting.json"
SETTING_ENV = "GTENUM_SETTING"


@dataclass
class Setting(JsonMixin):
    tab_size: int = field(default=4)
    log_dir: Path | None = field(default=None)

    def __post_init__(self) -> None:
        if self.tab_size < 0:
            raise ValueError(f"tab_size must be non-negative, got {self.tab_size}")

    def save(self, path: str | Path = SETTING_FILE) -> None:
        self.to_json_file(path, 4)
        logger.info(f"saved setting to {path}")

    @staticmethod
    def load(path: str | Path = SETTING_FILE) -> "Setting":
        path = Path(path)
        if not path.exists():
            logger.debug(f"{path} does not exist, using defaults")
            return Setting()

        logger.info(f"loaded setting from {path}")
        return Setting.from_json_file(path)


def setting_path() -> Path:
    env = os.environ.get(SETTING_ENV)
    return Path(env) if env else SETTING_FILE
