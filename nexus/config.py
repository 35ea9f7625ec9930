"""Configuration management"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = "INFO"

    # Project paths
    project_root: Path = Path(__file__).parent.parent
    data_dir: Path = project_root / "data"

    # Entity exports used by scripts/rank_personas.py (empty = <data_dir>/<name>.json)
    hosts_file: str = ""
    personas_file: str = ""

    @property
    def hosts_path(self) -> Path:
        return Path(self.hosts_file) if self.hosts_file else self.data_dir / "hosts.json"

    @property
    def personas_path(self) -> Path:
        return Path(self.personas_file) if self.personas_file else self.data_dir / "personas.json"


# Global settings instance
settings = Settings()
