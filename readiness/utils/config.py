"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/config.yaml"


class Config:
    """Engine configuration manager"""

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path or os.getenv("READINESS_CONFIG", DEFAULT_CONFIG_PATH))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        return {}

    @property
    def database_url(self) -> str:
        return os.getenv("READINESS_DATABASE_URL", self.get("persistence.database_url", ""))

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()

    @property
    def matching_weights(self) -> Dict[str, float]:
        return self._config.get("matching", {}).get("weights", {})

    @property
    def neutral_job_score(self) -> int:
        return int(self.get("matching.neutral_score", 50))

    @property
    def quick_match_partial_credit(self) -> float:
        return float(self.get("scoring.quick_match_partial_credit", 0.5))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

# Global config instance
config = Config()
