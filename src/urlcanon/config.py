# urlcanon — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Library and CLI settings with sane defaults.

	Environment variables are prefixed with URLCANON_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="URLCANON_", env_file=".env", extra="ignore")

	default_scheme: str = Field(default="http")
	query_separators: str = Field(default="&;")
	log_level: str = Field(default="INFO")
	# level of the "urlcanon" logger alone; None follows log_level
	library_log_level: Optional[str] = Field(default=None)
	log_dir: str = Field(default="logs")


settings = Settings()
