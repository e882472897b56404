# LinkMap — Seed list loading
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pathlib import Path
from typing import List, Optional

from ..errors import ConfigError


def seed_list_path(file_path: str, home_dir: Optional[str] = None) -> Path:
	"""Resolve file_path under home_dir, or the user's home directory.

	An absolute file_path is used unchanged.
	"""
	if home_dir:
		return Path(home_dir) / file_path
	try:
		home = Path.home()
	except (RuntimeError, KeyError) as e:
		raise ConfigError(f"cannot resolve home directory: {e}") from e
	return home / file_path


def read_seeds(path: Path) -> List[str]:
	"""One URL per line; carriage returns and blank lines are ignored."""
	try:
		content = path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as e:
		raise ConfigError(f"cannot read seed list [{path}]: {e}") from e
	seeds: List[str] = []
	for line in content.replace("\r", "").split("\n"):
		line = line.strip()
		if line:
			seeds.append(line)
	return seeds
