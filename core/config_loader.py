import yaml
import os
from functools import lru_cache
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./matching.db"


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class MatchingConfig(BaseModel):
    """
    Defaults for the matching engine.

    The weight and threshold fields seed every MatchCriteria; a request
    may override any subset of them.
    """
    # Dimension weights, intended to sum to 100
    distance_weight: float = Field(default=30.0, ge=0)
    expertise_weight: float = Field(default=25.0, ge=0)
    availability_weight: float = Field(default=20.0, ge=0)
    rating_weight: float = Field(default=15.0, ge=0)
    price_weight: float = Field(default=10.0, ge=0)

    minimum_match_score: float = Field(default=50.0, ge=0, le=100)
    max_matches: int = Field(default=10, ge=1)
    verified_only: bool = True

    # Worker threads used to score candidates; 1 scores sequentially
    scoring_workers: int = Field(default=4, ge=1)


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    env_workers = os.environ.get("MATCHING_SCORING_WORKERS")
    if env_workers:
        data.setdefault('matching', {})
        data['matching']['scoring_workers'] = int(env_workers)

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    return AppConfig(**_apply_env_overrides(data))


@lru_cache()
def get_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file and applies environment variable overrides.
    """
    return load_config(config_path or os.environ.get("MATCHING_CONFIG", "config.yaml"))
