from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError


class AppSettings(BaseModel):
    log_level: str = "INFO"


class BinanceSettings(BaseModel):
    base_url: str = "https://api.binance.com"
    # None keeps the transport's own default
    timeout_seconds: Optional[float] = None


class Config(BaseModel):
    app: AppSettings = AppSettings()
    binance: BinanceSettings = BinanceSettings()


class ConfigService:
    def __init__(self, default_path: Path = Path("config/config.yaml")) -> None:
        self.default_path = default_path
        self.config = Config()
        self.last_loaded: Optional[Path] = None

    def load(self, path: Optional[Path] = None) -> Config:
        path = path or self.default_path
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")

        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}

        try:
            self.config = Config(**data)
            self.last_loaded = path
            return self.config
        except ValidationError as exc:
            raise ValueError(f"Config validation error: {exc}") from exc

    def save(self, path: Optional[Path] = None) -> Path:
        path = path or self.default_path
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(self.config.model_dump(), fh, allow_unicode=True)
        self.last_loaded = path
        return path

    def active_config_name(self) -> str:
        return self.last_loaded.name if self.last_loaded else self.default_path.name
