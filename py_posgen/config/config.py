from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Default generator settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POSGEN_",
        extra="ignore",
    )

    # Scan margins (sky at the top, water at the bottom)
    margin_top: int = Field(default=40, description="Rows excluded at the top")
    margin_right: int = Field(default=1, description="Columns excluded on the right")
    margin_bottom: int = Field(default=60, description="Rows excluded at the bottom")
    margin_left: int = Field(default=1, description="Columns excluded on the left")

    # Sampling
    surface_point_min_width: int = Field(
        default=4, description="Minimum neighborhood width to keep a surface point"
    )
    terrain_point_max_try: int = Field(
        default=80, description="Attempts allowed when placing a sprite"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (e.g., console, json)")


# Instantiate singleton settings object
settings = Settings()
