# LinkMap — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Run settings with the defaults of the original tool.

	Environment variables are prefixed with LINKMAP_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="LINKMAP_", env_file=".env", extra="ignore")

	file_path: str = Field(default="link.txt")
	home_dir: Optional[str] = Field(default=None)
	max_depth: int = Field(default=10, ge=0)
	output_dir: Optional[str] = Field(default=None)
	workers: int = Field(default=1, ge=1)
	timeout: Optional[float] = Field(default=None, gt=0)
	user_agent: Optional[str] = Field(default=None)
	log_level: str = Field(default="INFO")
	log_dir: Optional[str] = Field(default="logs")
